"""Payload models for the bgpview.io ``/asn/{asn}/prefixes`` endpoint."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiParent(BaseModel):
    """Covering allocation of a prefix."""

    model_config = ConfigDict(extra="ignore")

    rir_name: str | None = Field(default=None)


class ApiPrefix(BaseModel):
    """One element of ``ipv4_prefixes`` / ``ipv6_prefixes``."""

    model_config = ConfigDict(extra="ignore")

    prefix: str
    name: str | None = Field(default=None)
    country_code: str | None = Field(default=None)
    description: str | None = Field(default=None)
    parent: ApiParent = Field(default_factory=ApiParent)

    @field_validator("parent", mode="before")
    @classmethod
    def _null_parent(cls, value: Any) -> Any:
        return {} if value is None else value


class ApiPrefixData(BaseModel):
    """The two prefix arrays, kept raw; elements are validated one by one."""

    model_config = ConfigDict(extra="ignore")

    ipv4_prefixes: list[Any] = Field(default_factory=list)
    ipv6_prefixes: list[Any] = Field(default_factory=list)


class ApiResponse(BaseModel):
    """Top-level document; ``status`` is ``"ok"`` on success."""

    model_config = ConfigDict(extra="ignore")

    status: str
    status_message: str | None = Field(default=None)
    data: ApiPrefixData = Field(default_factory=ApiPrefixData)

    @field_validator("status_message", mode="before")
    @classmethod
    def _message_text(cls, value: Any) -> Any:
        return str(value) if value not in (None, "") else None
