"""bgp.tools source.

Both families share one table body, ``donotscrapebgptools-prefixlist-tbody``;
rows are filtered by family after extraction. The first cell holds a flag
icon whose ``title`` is the country code, so a flattened row reads::

    (country_code, <first cell text>, prefix, description, ...)
"""
from __future__ import annotations

from collections.abc import Iterator

import structlog
from bs4 import BeautifulSoup

from ..cidr import AddressFamily
from ..models.prefix import PrefixRecord, RawTableRow
from ..models.source import SourceKind
from .base_html_source import BaseHTMLSource, IconStrategy, field_at

logger = structlog.get_logger(__name__)

TBODY_ID = "donotscrapebgptools-prefixlist-tbody"

# Positions in the flattened row. The layout is positional only: if the
# upstream table gains or loses a column these silently point elsewhere,
# and only the CIDR check on PREFIX_AT guards against it.
COUNTRY_AT = 0
PREFIX_AT = 2
DESCRIPTION_AT = 3
EXPECTED_WIDTH = DESCRIPTION_AT + 1


def permute(row: RawTableRow) -> tuple[str, str, str]:
    """Reorder a flattened row into ``(prefix, country_code, description)``."""
    if len(row) < EXPECTED_WIDTH:
        logger.debug("row_short", width=len(row), expected=EXPECTED_WIDTH)
    return field_at(row, PREFIX_AT), field_at(row, COUNTRY_AT), field_at(row, DESCRIPTION_AT)


class BgpToolsSource(BaseHTMLSource):
    """bgp.tools - one mixed-family HTML table."""

    kind = SourceKind.BGPTOOLS
    base_url = "https://bgp.tools"
    header = ("prefix", "country_code", "description")
    columns = ("prefix", "country_code", "description")
    icons = IconStrategy(selector="img", first_only=True)

    def url_for(self, asn: int, family: AddressFamily) -> str:
        return f"{self.base_url}/as/{asn}#prefixes"

    def table_id(self, family: AddressFamily) -> str:
        return TBODY_ID

    def extract(self, document: BeautifulSoup, family: AddressFamily) -> Iterator[PrefixRecord]:
        for row in self.iter_rows(document, family):
            prefix, country_code, description = permute(row)
            record = self._make_record(
                family, prefix, country_code=country_code, description=description
            )
            if record is not None:
                yield record
