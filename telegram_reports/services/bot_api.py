from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from telegram_reports.errors import DeliveryError
from telegram_reports.models.entities import Message

logger = logging.getLogger(__name__)

PARSE_MODE_HTML = "HTML"
DEFAULT_API_BASE = "https://api.telegram.org"


class MessagingClient(Protocol):
    def send_message(self, chat_id: str, text: str, parse_mode: str) -> Message:
        ...


class BotApi:
    """Minimal Telegram Bot API client. Only sendMessage is needed here."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 15.0,
        http_client: httpx.Client | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def __enter__(self) -> "BotApi":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _method_url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.token}/{method}"

    def _call(self, method: str, payload: dict[str, Any]) -> Any:
        try:
            resp = self._http.post(self._method_url(method), json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # Log the class only: request errors can carry the URL, which embeds the token.
            # InvalidURL is what a malformed token (e.g. trailing newline) produces.
            logger.warning("telegram %s transport failure: %s", method, exc.__class__.__name__)
            raise DeliveryError(f"{method} request failed: {exc.__class__.__name__}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("telegram %s returned non-JSON body (status=%s)", method, resp.status_code)
            raise DeliveryError(f"{method} returned a non-JSON response", error_code=resp.status_code) from exc

        if not isinstance(data, dict) or data.get("ok") is not True:
            body = data if isinstance(data, dict) else {}
            code = body.get("error_code", resp.status_code)
            description = str(body.get("description") or f"{method} was rejected")
            logger.warning("telegram %s rejected: [%s] %s", method, code, description)
            raise DeliveryError(description, error_code=code)

        return data.get("result")

    def send_message(self, chat_id: str, text: str, parse_mode: str = PARSE_MODE_HTML) -> Message:
        logger.debug("telegram sendMessage chat_id=%s len=%d", chat_id, len(text))
        result = self._call("sendMessage", {"chat_id": chat_id, "text": text, "parse_mode": parse_mode})
        try:
            return Message.model_validate(result)
        except ValidationError as exc:
            raise DeliveryError(f"unexpected sendMessage result: {result!r}") from exc
