"""
Text oracle: ask a chat-completion API for one short whimsical phrase.
Any transport failure, unreadable body, or unexpected shape raises OracleError.
"""
import logging
from typing import Any

from .api_client import APIError, parse_json_response, post_json
from .errors import OracleError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a whimsical phrase generator."
USER_PROMPT = "Generate a random short whimsical phrase:"
MAX_TOKENS = 16
TEMPERATURE = 0.7


def build_request_body(model: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": USER_PROMPT},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


def extract_content(payload: Any) -> str:
    """Return choices[0].message.content; OracleError if any step is missing or mistyped."""
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not isinstance(choices, list) or not choices:
        raise OracleError("unexpected API response format: no choices")
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise OracleError("unexpected API response format: no message content")
    return content


def fetch_phrase(settings: dict[str, Any], *, session=None) -> str:
    """
    POST the phrase request described by settings (the `oracle` config section)
    and return the generated text. The raw response body is printed before extraction.
    """
    body = build_request_body(settings.get("model", "gpt-4"))
    try:
        resp = post_json(
            settings["endpoint"],
            body,
            bearer_token=settings.get("api_key"),
            timeout=settings.get("timeout"),
            max_retries=int(settings.get("max_retries") or 0),
            session=session,
        )
    except APIError as e:
        raise OracleError(str(e), body=e.body) from e

    # Diagnostics: always show what came back
    print(f"API Response: {resp.text}")

    try:
        payload = parse_json_response(resp)
    except APIError as e:
        raise OracleError(str(e), body=e.body) from e
    text = extract_content(payload)
    logger.info("Oracle phrase: %r", text)
    return text
