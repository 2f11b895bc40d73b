"""Base interface for prefix sources."""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, ClassVar, Protocol, runtime_checkable

import structlog
from pydantic import ValidationError

from ..cidr import AddressFamily, try_classify
from ..config import BROWSER_USER_AGENT
from ..models.prefix import PrefixRecord
from ..models.source import SourceKind

logger = structlog.get_logger(__name__)


@runtime_checkable
class PrefixSource(Protocol):
    """Protocol every prefix source implements."""

    kind: SourceKind
    header: tuple[str, ...]
    columns: tuple[str, ...]

    def url_for(self, asn: int, family: AddressFamily) -> str:
        """Build the single URL fetched for ``asn``/``family``."""
        ...

    def parse(self, text: str) -> Any:
        """Turn a response body into a document, or None if it is unusable."""
        ...

    def check_status(self, document: Any) -> None:
        """Raise a ``SourceError`` when the document reports its own failure."""
        ...

    def extract(self, document: Any, family: AddressFamily) -> Iterator[PrefixRecord]:
        """Yield the records of ``family`` found in ``document``."""
        ...


class BaseSource(ABC):
    """Abstract base class for prefix sources.

    Subclasses fix their output layout through ``header`` (CSV column titles)
    and ``columns`` (the ``PrefixRecord`` attribute written under each title).
    The layout never changes during a run.
    """

    kind: ClassVar[SourceKind]
    base_url: ClassVar[str] = ""
    header: ClassVar[tuple[str, ...]] = ()
    columns: ClassVar[tuple[str, ...]] = ()
    default_user_agent: ClassVar[str] = BROWSER_USER_AGENT

    def __init__(self, user_agent: str | None = None) -> None:
        """Initialize the source.

        Args:
            user_agent: Override for the User-Agent header sent to this source
        """
        self.user_agent = user_agent or self.default_user_agent

    @property
    def name(self) -> str:
        return self.kind.host

    @abstractmethod
    def url_for(self, asn: int, family: AddressFamily) -> str:
        """Build the single URL fetched for ``asn``/``family``."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Turn a response body into a document, or None if it is unusable."""

    @abstractmethod
    def extract(self, document: Any, family: AddressFamily) -> Iterator[PrefixRecord]:
        """Yield the records of ``family`` found in ``document``."""

    def check_status(self, document: Any) -> None:
        """Sources without an in-band status have nothing to check."""

    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    def _make_record(
        self, family: AddressFamily, prefix: str, **fields: str
    ) -> PrefixRecord | None:
        """Build a record if ``prefix`` is a CIDR of ``family``.

        Returns:
            The record, or None when the row must be skipped
        """
        classified = try_classify(prefix)
        if classified is None:
            logger.debug("row_skipped", source=self.name, reason="invalid_cidr", value=prefix)
            return None

        found, normalized = classified
        if found != family:
            logger.debug(
                "row_skipped",
                source=self.name,
                reason="family_mismatch",
                value=normalized,
                family=found.label,
            )
            return None

        try:
            record = PrefixRecord(prefix=normalized, **fields)
        except ValidationError as e:
            logger.debug("row_skipped", source=self.name, reason="invalid_record", error=str(e))
            return None

        logger.info("prefix_captured", source=self.name, row=record.to_row(self.columns))
        return record
