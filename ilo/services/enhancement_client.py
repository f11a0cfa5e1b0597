"""
Enhancement Client

Wizard side of the enhancement round-trip: posts the derived sentence to
the backend and parses the reply into sections.
"""

import json
import logging
import time
from typing import List, Optional

import httpx
from pydantic import BaseModel, Field

from ilo.exceptions import EnhancementRequestError, EnhancementResponseError
from ilo.models.session_state import EnhancementSection
from ilo.services.section_parser import parse_sections

logger = logging.getLogger(__name__)


class EnhancementClientConfig(BaseModel):
    """Where and how to reach the enhancement endpoint."""

    base_url: str = Field(default="http://localhost:3001", description="Backend base URL")
    endpoint_path: str = Field(default="/enhance-ilo", description="Enhancement route")
    timeout_seconds: float = Field(default=60.0, description="Whole-request timeout")


class EnhancementClient:
    """
    Issues the enhancement request over HTTP.

    Pass `http_client` to share a connection pool or to plug in a test
    transport; otherwise a client is created per call.
    """

    def __init__(self, config: EnhancementClientConfig, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self._http_client = http_client

    @property
    def url(self) -> str:
        return f"{self.config.base_url.rstrip('/')}{self.config.endpoint_path}"

    async def enhance(self, ilo_sentence: str) -> List[EnhancementSection]:
        """
        Send `ilo_sentence` and return the parsed sections of the reply.

        Raises:
            EnhancementRequestError: transport failure, timeout, or non-2xx status.
            EnhancementResponseError: 2xx reply without an `enhancedILO` string.
        """
        start_time = time.time()
        logger.info(json.dumps({
            "step": "ENHANCE_REQUEST",
            "status": "starting",
            "endpoint": self.config.endpoint_path,
        }))

        if self._http_client is not None:
            response = await self._post(self._http_client, ilo_sentence)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._post(client, ilo_sentence)

        if response.is_error:
            error_code = _error_code(response)
            raise EnhancementRequestError(
                f"Enhancement failed with HTTP {response.status_code}",
                status_code=response.status_code,
                error_code=error_code,
            )

        try:
            enhanced = response.json()["enhancedILO"]
        except (ValueError, KeyError, TypeError) as e:
            raise EnhancementResponseError("Enhancement reply did not contain 'enhancedILO'") from e
        if not isinstance(enhanced, str):
            raise EnhancementResponseError("'enhancedILO' must be a string")

        sections = parse_sections(enhanced)
        logger.info(json.dumps({
            "step": "ENHANCE_REQUEST",
            "status": "complete",
            "output": {"sections": len(sections)},
            "duration_ms": int((time.time() - start_time) * 1000),
        }))
        return sections

    async def _post(self, client: httpx.AsyncClient, ilo_sentence: str) -> httpx.Response:
        try:
            return await client.post(
                self.url,
                json={"ilo": ilo_sentence},
                timeout=self.config.timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise EnhancementRequestError(
                f"Enhancement timed out after {self.config.timeout_seconds}s"
            ) from e
        except httpx.HTTPError as e:
            raise EnhancementRequestError(f"Enhancement request failed: {str(e)}") from e


def _error_code(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body.get("code") if isinstance(body, dict) else None
