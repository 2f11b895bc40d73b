"""Base class for sources that publish their prefixes as an HTML table."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import urlparse

import structlog
from bs4 import BeautifulSoup, Tag

from ..cidr import AddressFamily
from ..models.prefix import RawTableRow
from .base import BaseSource

logger = structlog.get_logger(__name__)


def country_code_from_icon_src(src: str) -> str:
    """Derive a country code from a flag icon path.

    ``/images/flags/us.gif`` gives ``US``. Query strings and fragments are
    ignored; a path without a file extension gives an empty string.
    """
    segment = urlparse(src).path.rsplit("/", 1)[-1]
    stem, dot, _ = segment.rpartition(".")
    if not dot or not stem:
        return ""
    return stem.upper()


@dataclass(frozen=True)
class IconStrategy:
    """How flag icons inside a table cell turn into row fragments.

    Each matched icon contributes an optional country code (only when
    ``code_from_src`` is set) followed by its ``title`` attribute.
    """

    selector: str = "img"
    first_only: bool = False
    code_from_src: Callable[[str], str] | None = None


def cell_text(cell: Tag) -> str:
    """Trimmed text of a cell with inner whitespace runs collapsed."""
    return " ".join(cell.get_text().split())


def flatten_row(row: Tag, icons: IconStrategy) -> RawTableRow:
    """Flatten a ``<tr>`` into an ordered tuple of fragments.

    Cells are visited in document order. A cell contributes its icon
    fragments first and then its text, with blanks kept as ``""`` so that
    positions stay aligned with the columns.
    """
    fragments: list[str] = []
    for cell in row.find_all("td"):
        matched = cell.select(icons.selector)
        if icons.first_only:
            matched = matched[:1]
        for img in matched:
            if icons.code_from_src is not None:
                fragments.append(icons.code_from_src(img.get("src") or ""))
            fragments.append(img.get("title") or "")
        fragments.append(cell_text(cell))
    return tuple(fragments)


def field_at(row: RawTableRow, position: int) -> str:
    return row[position] if position < len(row) else ""


class BaseHTMLSource(BaseSource):
    """Base adapter for sources that need HTML table parsing.

    Provides parsing with BeautifulSoup, table lookup by element id and lazy,
    single-pass row flattening. Subclasses pick the table and map flattened
    positions onto record fields.
    """

    icons: ClassVar[IconStrategy] = IconStrategy()

    @abstractmethod
    def table_id(self, family: AddressFamily) -> str:
        """Element id of the table (or tbody) holding the rows for ``family``."""

    def parse(self, text: str) -> BeautifulSoup | None:
        if not text or not text.strip():
            return None
        return BeautifulSoup(text, "html.parser")

    def iter_rows(self, soup: BeautifulSoup, family: AddressFamily) -> Iterator[RawTableRow]:
        """Yield the non-empty flattened rows of the table for ``family``.

        A document without the table yields nothing: both HTML sources omit
        the table when an ASN announces nothing for that family.
        """
        table_id = self.table_id(family)
        table = soup.find(id=table_id)
        if table is None:
            logger.info("table_missing", source=self.name, table_id=table_id)
            return

        for tr in table.find_all("tr"):
            row = flatten_row(tr, self.icons)
            if row:
                yield row
