"""
Remote translation endpoint client.

Posts {"text", "fromLang", "toLang"} to a configured translation endpoint
(for instance another deployment's POST /translation/ai) and expects
{"translation": str, "confidence"?: number} back.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from models.translation import RemoteTranslation
from services.errors import RemoteTranslationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class RemoteTranslationClient:
    """Remote translator that calls a JSON translation endpoint."""

    def __init__(
        self,
        endpoint_url: str,
        api_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not endpoint_url:
            raise ValueError("TRANSLATION_ENDPOINT_URL is not configured")
        self.endpoint_url = endpoint_url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def __call__(self, text: str, from_lang_name: str, to_lang_name: str) -> RemoteTranslation:
        return self.translate(text, from_lang_name, to_lang_name)

    def translate(self, text: str, from_lang_name: str, to_lang_name: str) -> RemoteTranslation:
        """Send one translation request.

        Raises:
            RemoteTranslationError: On transport errors, non-2xx status,
                or a body without a usable translation.
        """
        payload = {"text": text, "fromLang": from_lang_name, "toLang": to_lang_name}

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.endpoint_url, json=payload, headers=self._headers())
        except httpx.RequestError as e:
            logger.warning(
                "Translation endpoint request error",
                extra={"endpoint": self.endpoint_url, "error_type": type(e).__name__},
            )
            raise RemoteTranslationError(f"Translation request failed: {type(e).__name__}") from e

        if not response.is_success:
            raise RemoteTranslationError(
                _error_message(response) or f"Translation endpoint returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteTranslationError("Translation endpoint returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise RemoteTranslationError(
                f"Unexpected response type from translation endpoint: {type(data).__name__}"
            )

        try:
            return RemoteTranslation(
                translation=data.get("translation") or "",
                confidence=data.get("confidence"),
            )
        except ValidationError as e:
            raise RemoteTranslationError(f"Malformed translation payload: {e.error_count()} error(s)") from e


def _error_message(response: httpx.Response) -> Optional[str]:
    """Read the {"error": "..."} message from a failed response, if any."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
