"""Canonical prefix record and the transport result it is extracted from."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from asn_cidr.cidr import AddressFamily, classify

# One flattened HTML table row; positions are source-specific.
RawTableRow = tuple[str, ...]


class PrefixRecord(BaseModel):
    """One announced prefix, normalized across all sources.

    ``address_family`` is always derived from ``prefix``; any value passed in
    for it is overwritten. Construction fails for a prefix that is not a valid
    CIDR, so a malformed record cannot be created at all.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(description="Normalized CIDR literal")
    address_family: AddressFamily = Field(default=AddressFamily.V4)
    country_code: str = Field(default="")
    country_name_or_label: str = Field(
        default="", description="Country name or descriptive label, source-dependent"
    )
    description: str = Field(default="", description="AS name, org or routing description")
    rir_name: str = Field(default="", description="Allocating registry (bgpview only)")

    @model_validator(mode="before")
    @classmethod
    def _derive_family(cls, data: Any) -> Any:
        if isinstance(data, dict) and "prefix" in data:
            family, normalized = classify(data["prefix"])
            data = {**data, "prefix": normalized, "address_family": family}
        return data

    def to_row(self, columns: tuple[str, ...]) -> list[str]:
        """Project the record onto a source's output columns."""
        return [str(getattr(self, column)) for column in columns]


class RawResponse(BaseModel):
    """What the transport hands to the pipeline: a status code and a body."""

    status_code: int
    text: str = ""
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
