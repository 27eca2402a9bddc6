# ============================================================================
# ExplorerClient - HTTP Sink
#
# Purpose: POST completed measurements to the collector's /add endpoint
# Inputs: Measurement payload dicts
# Outputs: HTTP POST to <explorer_uri>/add
# Dependencies: httpx, base, errors
# Usage: sink = HTTPSink("http://collector.local"); sink.write(payload)
#
# Changelog:
#   2026-10-02: Initial HTTPSink
#   2026-10-09: Optional timeout; User-Agent carries the service name
# ============================================================================

from typing import Any, Dict, Optional

import httpx

from ExplorerClient import __version__
from ExplorerClient.errors import DeliveryError
from ExplorerClient.logging_utils import get_logger
from ExplorerClient.sinks.base import Sink

logger = get_logger(__name__)

ADD_PATH = "/add"


class HTTPSink(Sink):
    """Sink that POSTs measurement payloads as JSON to the collector.

    Any 2xx response counts as delivered. Transport errors, non-2xx
    responses and payloads that cannot be serialised raise
    :class:`DeliveryError`. No retries are attempted.
    """

    def __init__(
        self,
        explorer_uri: str,
        *,
        service: str = "",
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize HTTP sink.

        Args:
            explorer_uri: Collector base URI (e.g. "http://collector.local")
            service: Service name reported in the User-Agent header
            timeout: Seconds per request; None waits indefinitely
            client: Pre-built httpx client (takes precedence over transport)
            transport: httpx transport for the internally built client
        """
        self.url = explorer_uri.rstrip("/") + ADD_PATH
        self.service = service
        user_agent = f"explorer-client/{__version__}"
        if service:
            user_agent = f"{user_agent} ({service})"
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        logger.info(f"HTTPSink initialized: {self.url}")

    def write(self, payload: Dict[str, Any]) -> str:
        """
        POST payload to the collector.

        Args:
            payload: Measurement payload

        Returns:
            The URL the payload was delivered to

        Raises:
            DeliveryError: If the request fails or the response is not 2xx
        """
        try:
            response = self._client.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except (TypeError, ValueError) as e:
            raise DeliveryError(
                f"Failed to serialize measurement payload: {e}",
                details=f"url={self.url}",
            ) from e
        except httpx.HTTPError as e:
            raise DeliveryError(
                f"Failed to deliver measurement to explorer: {e}",
                details=f"url={self.url}",
            ) from e

        if not response.is_success:
            raise DeliveryError(
                f"Explorer rejected measurement with status {response.status_code}",
                details=f"url={self.url}, status={response.status_code}",
            )

        return self.url

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
