"""Extraction pipeline: one response in, one header plus records out.

``run`` is synchronous and works on a response already in memory;
``fetch_and_run`` adds the single network fetch and the file sink around it.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from asn_cidr.cidr import AddressFamily
from asn_cidr.exceptions import HttpFailure
from asn_cidr.models.prefix import RawResponse
from asn_cidr.models.source import SourceKind
from asn_cidr.net import Transport
from asn_cidr.output import OutputSink, PrefixFileSink, output_paths
from asn_cidr.sources import BaseSource, get_source

logger = structlog.get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of a completed run."""

    source: SourceKind
    asn: int
    family: AddressFamily
    url: str
    count: int
    csv_path: Path
    txt_path: Path


def _resolve(source: BaseSource | SourceKind | str | int) -> BaseSource:
    if isinstance(source, BaseSource):
        return source
    return get_source(source)


def run(
    source: BaseSource | SourceKind | str | int,
    family: AddressFamily | str | int,
    response: RawResponse,
    sink: OutputSink,
) -> int:
    """Extract the records of ``family`` from ``response`` into ``sink``.

    Args:
        source: Source kind (or a ready adapter) that produced the response
        family: Requested address family
        response: Transport result
        sink: Destination; opened only once the response is known to be usable

    Returns:
        Number of records written

    Raises:
        UnknownSource: If ``source`` is not one of the supported sources
        HttpFailure: If the response status is not 2xx
        SourceStatusNotOk: If the payload reports a failure status
    """
    adapter = _resolve(source)
    family = AddressFamily.parse(family)

    if not response.ok:
        raise HttpFailure(response.status_code, response.url)

    document = adapter.parse(response.text)
    if document is not None:
        adapter.check_status(document)
        records = adapter.extract(document, family)
    else:
        logger.warning("document_unusable", source=adapter.name, url=response.url)
        records = iter(())

    count = 0
    try:
        sink.open()
        sink.write_header(adapter.header)
        for record in records:
            sink.write(record, adapter.columns)
            count += 1
    finally:
        sink.close()

    logger.info("run_complete", source=adapter.name, family=family.label, count=count)
    return count


async def fetch_and_run(
    source: SourceKind | str | int,
    asn: int,
    family: AddressFamily | str | int,
    output_dir: Path,
    transport: Transport | None = None,
    user_agent: str | None = None,
    timeout: float = 30.0,
) -> RunResult:
    """Fetch the page for ``asn`` from ``source`` and write its prefixes.

    Files land in ``{output_dir}/{source host}/AS{asn}_v{4|6}.csv|.txt``.
    The source is resolved before any network activity.
    """
    adapter = get_source(source, user_agent=user_agent)
    family = AddressFamily.parse(family)
    url = adapter.url_for(asn, family)
    csv_path, txt_path = output_paths(Path(output_dir) / adapter.name, asn, family)

    if transport is None:
        async with Transport(timeout=timeout) as own:
            response = await own.get(url, headers=adapter.headers())
    else:
        response = await transport.get(url, headers=adapter.headers())

    count = run(adapter, family, response, PrefixFileSink(csv_path, txt_path))
    return RunResult(
        source=adapter.kind,
        asn=asn,
        family=family,
        url=url,
        count=count,
        csv_path=csv_path,
        txt_path=txt_path,
    )
