"""Data models shared by the sources, the pipeline and the writers."""

from asn_cidr.cidr import AddressFamily
from asn_cidr.models.bgpview import ApiParent, ApiPrefix, ApiPrefixData, ApiResponse
from asn_cidr.models.prefix import PrefixRecord, RawResponse, RawTableRow
from asn_cidr.models.source import SourceKind

__all__ = [
    "AddressFamily",
    "ApiParent",
    "ApiPrefix",
    "ApiPrefixData",
    "ApiResponse",
    "PrefixRecord",
    "RawResponse",
    "RawTableRow",
    "SourceKind",
]
