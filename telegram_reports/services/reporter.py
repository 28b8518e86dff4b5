from __future__ import annotations

from telegram_reports.models.entities import ExceptionReport, Message, ReportLevel
from telegram_reports.services.bot_api import PARSE_MODE_HTML, BotApi, MessagingClient
from telegram_reports.services.formatting import build_exception_content, build_report
from telegram_reports.settings import Settings, settings


class Reporter:
    """Formats severity-tagged reports and sends them to a single Telegram chat.

    Delivery failures raised by the client (DeliveryError) reach the caller
    untouched; nothing here retries or swallows them.
    """

    def __init__(
        self,
        token: str,
        chat_id: str,
        client: MessagingClient | None = None,
        *,
        owns_client: bool | None = None,
    ):
        self.token = token
        self.chat_id = chat_id
        self._bot: MessagingClient = client if client is not None else BotApi(token)
        # An injected client is left open by close() unless ownership is handed over.
        self._owns_bot = client is None if owns_client is None else owns_client

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "Reporter":
        cfg = cfg or settings
        if not cfg.telegram_bot_token or not cfg.telegram_chat_id:
            raise ValueError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must both be configured")
        client = BotApi(
            cfg.telegram_bot_token,
            base_url=cfg.telegram_api_base,
            timeout=cfg.telegram_timeout_sec,
        )
        return cls(cfg.telegram_bot_token, cfg.telegram_chat_id, client=client, owns_client=True)

    @property
    def bot(self) -> MessagingClient:
        return self._bot

    def __enter__(self) -> "Reporter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if not self._owns_bot:
            return
        close = getattr(self._bot, "close", None)
        if callable(close):
            close()

    def send_html_message(self, content: str) -> Message:
        return self._bot.send_message(self.chat_id, content, PARSE_MODE_HTML)

    def report(self, level: ReportLevel | str, content: str, title: str | None = None) -> Message:
        return self.send_html_message(build_report(level, content, title))

    def report_exception(self, error: BaseException, is_critical: bool = False) -> Message:
        level = ReportLevel.CRITICAL_ERROR if is_critical else ReportLevel.ERROR
        content = build_exception_content(ExceptionReport.from_exception(error))
        return self.report(level, content)

    def info(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.INFORMATION, content, title)

    def warning(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.WARNING, content, title)

    def debug(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.DEBUG, content, title)

    def success(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.SUCCESS, content, title)

    def error(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.ERROR, content, title)

    def critical(self, content: str, title: str | None = None) -> Message:
        return self.report(ReportLevel.CRITICAL_ERROR, content, title)
