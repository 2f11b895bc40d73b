from __future__ import annotations

from dataclasses import dataclass


class AsnCidrError(Exception):
    """Base class for every error raised by asn-cidr."""


class SourceError(AsnCidrError):
    """A source could not deliver usable data; the run stops without output."""


@dataclass
class HttpFailure(SourceError):
    """The source answered with a non-success HTTP status."""

    status_code: int
    url: str = ""

    def __str__(self) -> str:
        base = f"HTTP request failed with status {self.status_code}"
        if self.url:
            base += f" ({self.url})"
        return base


@dataclass
class SourceStatusNotOk(SourceError):
    """The JSON payload reported its own failure status."""

    status: str
    message: str | None = None

    def __str__(self) -> str:
        base = f"source returned status {self.status!r} instead of 'ok'"
        if self.message:
            base += f": {self.message}"
        return base


@dataclass
class TransportFailure(SourceError):
    """The request never produced a response (connection error, timeout)."""

    url: str
    reason: str

    def __str__(self) -> str:
        return f"request to {self.url} failed: {self.reason}"


@dataclass
class UnknownSource(AsnCidrError):
    """An out-of-range or unrecognized source selector."""

    value: object

    def __str__(self) -> str:
        return f"unknown source: {self.value!r} (expected 0, 1, 2 or bgpview, he, bgptools)"


class InvalidCidr(ValueError):
    """Text that is not an IPv4 or IPv6 network in CIDR notation."""
