"""Prefix sources and the registry that maps each ``SourceKind`` to one."""
from __future__ import annotations

from asn_cidr.models.source import SourceKind
from asn_cidr.sources.base import BaseSource, PrefixSource
from asn_cidr.sources.base_html_source import (
    BaseHTMLSource,
    IconStrategy,
    country_code_from_icon_src,
    flatten_row,
)
from asn_cidr.sources.bgp_tools import BgpToolsSource
from asn_cidr.sources.bgpview import BgpViewSource
from asn_cidr.sources.he_net import HeNetSource

SOURCES: dict[SourceKind, type[BaseSource]] = {
    SourceKind.BGPVIEW: BgpViewSource,
    SourceKind.HE: HeNetSource,
    SourceKind.BGPTOOLS: BgpToolsSource,
}


def get_source(kind: SourceKind | str | int, user_agent: str | None = None) -> BaseSource:
    """Instantiate the source for ``kind``.

    Raises:
        UnknownSource: If ``kind`` does not name one of the supported sources
    """
    return SOURCES[SourceKind.parse(kind)](user_agent=user_agent)


__all__ = [
    "BaseHTMLSource",
    "BaseSource",
    "BgpToolsSource",
    "BgpViewSource",
    "HeNetSource",
    "IconStrategy",
    "PrefixSource",
    "SOURCES",
    "country_code_from_icon_src",
    "flatten_row",
    "get_source",
]
