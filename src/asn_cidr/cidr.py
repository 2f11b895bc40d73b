"""CIDR classification.

Every string pulled out of a source passes through :func:`classify` before it
can become a record. Sources interleave header rows, adverts and blank
separators with real data, so a failed classification is routine: callers skip
the row and move on.
"""
from __future__ import annotations

import ipaddress
from enum import Enum

from asn_cidr.exceptions import InvalidCidr


class AddressFamily(int, Enum):
    """IP address family, valued by its version number."""

    V4 = 4
    V6 = 6

    @classmethod
    def parse(cls, value: str | int) -> AddressFamily:
        """Accept 4/6 as well as "v4", "ipv6" and similar spellings."""
        if isinstance(value, AddressFamily):
            return value
        text = str(value).strip().lower()
        for prefix in ("ipv", "v"):
            if text.startswith(prefix):
                text = text[len(prefix):]
                break
        if text == "4":
            return cls.V4
        if text == "6":
            return cls.V6
        raise ValueError(f"CIDR version must be 4 or 6, got {value!r}")

    @property
    def label(self) -> str:
        return f"IPv{self.value}"


def classify(text: str) -> tuple[AddressFamily, str]:
    """Classify ``text`` as an IPv4 or IPv6 network.

    Args:
        text: Candidate CIDR literal, e.g. ``"1.1.1.0/24"``

    Returns:
        The address family and the canonical network string (IPv6 compressed
        and lower-cased, host bits cleared)

    Raises:
        InvalidCidr: If ``text`` is not an address followed by a prefix length
    """
    if not isinstance(text, str):
        raise InvalidCidr(f"not a string: {text!r}")

    candidate = text.strip()
    if "/" not in candidate:
        raise InvalidCidr(f"missing prefix length: {text!r}")

    try:
        network = ipaddress.ip_network(candidate, strict=False)
    except ValueError as e:
        raise InvalidCidr(str(e)) from e

    family = AddressFamily.V4 if network.version == 4 else AddressFamily.V6
    return family, str(network)


def try_classify(text: str) -> tuple[AddressFamily, str] | None:
    """Like :func:`classify` but returns None for anything that is not a CIDR."""
    try:
        return classify(text)
    except InvalidCidr:
        return None
