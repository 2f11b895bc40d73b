"""bgpview.io JSON API source.

``GET https://api.bgpview.io/asn/{asn}/prefixes`` returns both address
families in one document, each prefix annotated with its name, country,
description and the registry of its covering allocation.
"""
from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

import structlog
from pydantic import ValidationError

from ..cidr import AddressFamily
from ..exceptions import SourceStatusNotOk
from ..models.bgpview import ApiPrefix, ApiResponse
from ..models.prefix import PrefixRecord
from ..models.source import SourceKind
from .base import BaseSource

logger = structlog.get_logger(__name__)

OK_STATUS = "ok"


class BgpViewSource(BaseSource):
    """bgpview.io - JSON API, the only source that reports the RIR."""

    kind = SourceKind.BGPVIEW
    base_url = "https://api.bgpview.io"
    default_user_agent = "Mozilla/5.0"
    header = ("prefix", "country_code", "name", "description", "rir_name")
    columns = ("prefix", "country_code", "country_name_or_label", "description", "rir_name")

    def url_for(self, asn: int, family: AddressFamily) -> str:
        # Both families come back in the same document.
        return f"{self.base_url}/asn/{asn}/prefixes"

    def parse(self, text: str) -> ApiResponse | None:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("json_malformed", source=self.name, error=str(e))
            return None

        if not isinstance(payload, dict):
            logger.warning("json_unexpected_shape", source=self.name, type=type(payload).__name__)
            return None

        status = str(payload.get("status", ""))
        if status != OK_STATUS:
            # Error payloads rarely carry a usable ``data`` object; keep the status only.
            return ApiResponse(status=status, status_message=payload.get("status_message"))

        try:
            return ApiResponse.model_validate(payload)
        except ValidationError as e:
            logger.warning("json_invalid", source=self.name, error=str(e))
            return None

    def check_status(self, document: ApiResponse) -> None:
        if document.status != OK_STATUS:
            raise SourceStatusNotOk(document.status, document.status_message)

    def extract(self, document: ApiResponse, family: AddressFamily) -> Iterator[PrefixRecord]:
        """Yield the records of the array matching ``family``.

        Nothing is yielded for a non-ok document; ``check_status`` is where
        that condition is reported. Elements that do not match the prefix
        model, or that are filed under the wrong family, are skipped one by
        one.
        """
        if document.status != OK_STATUS:
            return

        if family == AddressFamily.V4:
            prefixes = document.data.ipv4_prefixes
        else:
            prefixes = document.data.ipv6_prefixes

        for raw in prefixes:
            try:
                item = ApiPrefix.model_validate(raw)
            except ValidationError as e:
                logger.debug("row_skipped", source=self.name, reason="invalid_element", error=str(e))
                continue

            record = self._make_record(family, item.prefix, **self._fields(item))
            if record is not None:
                yield record

    @staticmethod
    def _fields(item: ApiPrefix) -> dict[str, Any]:
        return {
            "country_code": item.country_code or "",
            "country_name_or_label": item.name or "",
            "description": item.description or "",
            "rir_name": item.parent.rir_name or "",
        }
