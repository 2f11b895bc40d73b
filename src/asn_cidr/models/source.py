"""The closed set of supported prefix sources."""
from __future__ import annotations

from enum import Enum

from asn_cidr.exceptions import UnknownSource


class SourceKind(str, Enum):
    """Prefix sources, in the order of their historical numeric selector."""

    BGPVIEW = "bgpview"
    HE = "he"
    BGPTOOLS = "bgptools"

    @property
    def index(self) -> int:
        return list(SourceKind).index(self)

    @property
    def host(self) -> str:
        return _HOSTS[self]

    @classmethod
    def from_index(cls, index: int) -> SourceKind:
        members = list(cls)
        if not 0 <= index < len(members):
            raise UnknownSource(index)
        return members[index]

    @classmethod
    def parse(cls, value: str | int | SourceKind) -> SourceKind:
        """Resolve a selector given as an index, a name or a host."""
        if isinstance(value, SourceKind):
            return value
        if isinstance(value, int):
            return cls.from_index(value)

        text = str(value).strip().lower()
        if text.isdigit():
            return cls.from_index(int(text))
        for kind in cls:
            if text in (kind.value, kind.host):
                return kind
        raise UnknownSource(value)


_HOSTS = {
    SourceKind.BGPVIEW: "api.bgpview.io",
    SourceKind.HE: "bgp.he.net",
    SourceKind.BGPTOOLS: "bgp.tools",
}
