"""
HTTP client for the chat-completion endpoint. Uses requests; one POST per call.
No timeout and no retries unless the caller asks for them.
"""
import json
import logging
import time

import requests

logger = logging.getLogger(__name__)

DEFAULT_BACKOFF_SECONDS = 2.0


class APIError(Exception):
    """API call failed at the transport level or returned an unreadable body."""
    def __init__(self, message: str, status_code: int | None = None, path: str = "", body: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.path = path
        self.body = body


def parse_json_response(resp: requests.Response) -> dict:
    """Parse JSON body; raise APIError with context if invalid."""
    try:
        return resp.json()
    except (json.JSONDecodeError, ValueError) as e:
        raise APIError(
            f"Invalid JSON response: {e}",
            status_code=resp.status_code,
            path=resp.url or "",
            body=resp.text[:500] if resp.text else None,
        ) from e


def post_json(
    url: str,
    data: dict,
    *,
    bearer_token: str | None = None,
    timeout: float | None = None,
    max_retries: int = 0,
    backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    session: requests.Session | None = None,
) -> requests.Response:
    """
    POST a JSON body and return the response unparsed.
    HTTP status is not checked: a non-2xx response is still returned so the caller's
    shape check decides. If max_retries > 0, retries on connection errors and timeouts only.
    """
    headers = {"Content-Type": "application/json"}
    if bearer_token:
        headers["Authorization"] = f"Bearer {bearer_token}"
    body = json.dumps(data).encode()
    sender = session or requests

    for attempt in range(max(1, max_retries + 1)):
        try:
            resp = sender.post(url, data=body, headers=headers, timeout=timeout)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            if attempt < max_retries:
                logger.warning("POST %s connection/timeout (attempt %s), retrying in %.1fs", url, attempt + 1, backoff_seconds)
                time.sleep(backoff_seconds)
                continue
            raise APIError(f"POST {url} failed: {e}", path=url) from e
        except requests.exceptions.RequestException as e:
            raise APIError(f"POST {url} failed: {e}", path=url) from e
        logger.debug("POST %s -> %s", url, resp.status_code)
        return resp
    raise APIError(f"POST {url} failed", path=url)
