"""Hurricane Electric BGP Toolkit (bgp.he.net) source.

The AS page carries one prefix table per family, ``table_prefixes4`` and
``table_prefixes6``. Each row is ``Prefix | Description`` where the
description cell also holds a flag icon::

    <td><a href="/net/1.2.3.0/24">1.2.3.0/24</a></td>
    <td><div class="flag alignright floatright">
          <img src="/images/flags/us.gif" title="United States"></div>
        Example Org</td>

which flattens to ``("1.2.3.0/24", "US", "United States", "Example Org")``.
"""
from __future__ import annotations

from collections.abc import Iterator

from bs4 import BeautifulSoup

from ..cidr import AddressFamily
from ..models.prefix import PrefixRecord
from ..models.source import SourceKind
from .base_html_source import BaseHTMLSource, IconStrategy, country_code_from_icon_src, field_at

TABLE_IDS = {
    AddressFamily.V4: "table_prefixes4",
    AddressFamily.V6: "table_prefixes6",
}

# prefix, country code, country name, description
FLAGGED_ROW_WIDTH = 4


class HeNetSource(BaseHTMLSource):
    """bgp.he.net - HTML tables split by address family."""

    kind = SourceKind.HE
    base_url = "https://bgp.he.net"
    header = ("prefix", "country_code", "country_name", "description")
    columns = ("prefix", "country_code", "country_name_or_label", "description")
    icons = IconStrategy(selector="div.flag img", code_from_src=country_code_from_icon_src)

    def url_for(self, asn: int, family: AddressFamily) -> str:
        anchor = "#_prefixes" if family == AddressFamily.V4 else "#_prefixes6"
        return f"{self.base_url}/AS{asn}{anchor}"

    def table_id(self, family: AddressFamily) -> str:
        return TABLE_IDS[AddressFamily(family)]

    def extract(self, document: BeautifulSoup, family: AddressFamily) -> Iterator[PrefixRecord]:
        for row in self.iter_rows(document, family):
            if len(row) >= FLAGGED_ROW_WIDTH:
                country_code, country_name, rest = field_at(row, 1), field_at(row, 2), row[3:]
            else:
                # No flag icon in the row: everything after the prefix is description.
                country_code, country_name, rest = "", "", row[1:]

            record = self._make_record(
                family,
                row[0],
                country_code=country_code,
                country_name_or_label=country_name,
                description=" ".join(part for part in rest if part),
            )
            if record is not None:
                yield record
