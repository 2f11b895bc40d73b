"""HTTP transport: one GET per run, returning status and body untouched."""
from __future__ import annotations

import httpx
import structlog

from asn_cidr.exceptions import TransportFailure
from asn_cidr.models.prefix import RawResponse

logger = structlog.get_logger(__name__)


class Transport:
    """Thin wrapper over ``httpx.AsyncClient``.

    Status codes are not interpreted here; the pipeline decides what a
    non-success status means. No retries.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def get(self, url: str, headers: dict[str, str] | None = None) -> RawResponse:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

        logger.info("fetch_start", url=url)
        try:
            resp = await self._client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportFailure(url, f"timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise TransportFailure(url, str(e) or type(e).__name__) from e

        logger.info("fetch_done", url=url, status=resp.status_code, size=len(resp.content))
        return RawResponse(status_code=resp.status_code, text=resp.text, url=str(resp.url))

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> Transport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        await self.close()
        return False
