"""HTTP utilities for posting to the analysis service with retry logic."""

from __future__ import annotations

import asyncio
from typing import Any, Final

import httpx

from legaloutline.config import (
    LEGALOUTLINE_FETCH_BACKOFF_S,
    LEGALOUTLINE_FETCH_MAX_RETRIES,
    LEGALOUTLINE_FETCH_TIMEOUT_S,
    LEGALOUTLINE_USER_AGENT,
)
from legaloutline.exceptions import (
    AnalysisServiceError,
    AnalysisUnavailableError,
    InvalidAnalysisResponseError,
)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

DEFAULT_ERROR_DETAIL: Final[str] = "Upload failed"

_MAX_REDIRECTS: Final[int] = 5


async def post_with_retries(
    url: str,
    *,
    files: dict[str, Any] | None = None,
    json: Any = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """POST to a URL and return the decoded JSON body, retrying transient failures.

    Args:
        url: The URL to post to.
        files: Multipart files, in the format httpx accepts.
        json: JSON body to send instead of files.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.

    Returns:
        The parsed JSON response.

    Raises:
        AnalysisServiceError: If the service answers with a non-retryable
            error status. The service's ``detail`` field is used as message.
        AnalysisUnavailableError: If the request fails after all retries.
        InvalidAnalysisResponseError: If a successful response is not JSON.
    """
    timeout = httpx.Timeout(LEGALOUTLINE_FETCH_TIMEOUT_S)
    headers = {"User-Agent": LEGALOUTLINE_USER_AGENT}
    last_exc: Exception | None = None

    async def do_post(http_client: httpx.AsyncClient) -> Any:
        nonlocal last_exc

        for attempt in range(LEGALOUTLINE_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.post(url, files=files, json=json)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = AnalysisServiceError(
                        f"HTTP {response.status_code} from {url}", status_code=response.status_code
                    )
                elif response.status_code >= 400:
                    raise AnalysisServiceError(_error_detail(response), status_code=response.status_code)
                else:
                    return _decode_json(response, url)
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < LEGALOUTLINE_FETCH_MAX_RETRIES:
                backoff = LEGALOUTLINE_FETCH_BACKOFF_S * (2**attempt)
                await asyncio.sleep(backoff)

        raise AnalysisUnavailableError(f"Failed to reach {url}: {last_exc}")

    if client is not None:
        return await do_post(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_post(new_client)


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_ERROR_DETAIL
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return DEFAULT_ERROR_DETAIL


def _decode_json(response: httpx.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise InvalidAnalysisResponseError(f"Non-JSON response from {url}") from exc
