from __future__ import annotations

import html

from telegram_reports.models.entities import ExceptionReport, ReportLevel

SIGNALS: dict[ReportLevel, str] = {
    ReportLevel.INFORMATION: "ℹ",
    ReportLevel.WARNING: "⚠",
    ReportLevel.DEBUG: "\U0001f47e",
    ReportLevel.SUCCESS: "✅",
    ReportLevel.ERROR: "\U0001f6a9",
    ReportLevel.CRITICAL_ERROR: "\U0001f525",
}


def _level_name(level: ReportLevel | str) -> str:
    if isinstance(level, ReportLevel):
        return level.value
    return str(level)


def get_report_signal(level: ReportLevel | str) -> str:
    try:
        key = ReportLevel(level)
    except ValueError:
        return SIGNALS[ReportLevel.INFORMATION]
    return SIGNALS[key]


def get_report_title(level: ReportLevel | str, title: str | None = None) -> str:
    if title:
        return title
    words = _level_name(level).replace("_", " ").lower().split(" ")
    # ucwords semantics: only the first letter of each word changes.
    return " ".join(w[:1].upper() + w[1:] for w in words) + "!"


def build_report(level: ReportLevel | str, content: str, title: str | None = None) -> str:
    return f"<strong>{get_report_signal(level)} {get_report_title(level, title)}</strong>\n\n{content}"


def build_exception_content(report: ExceptionReport) -> str:
    def esc(s: str) -> str:
        return html.escape(s, quote=False)

    return (
        f"Error: {esc(report.message)}\n"
        f"Code: {report.code}\n"
        f"File: {esc(report.file)}:{report.line}\n\n"
        f"Stack Trace:\n\n{esc(report.trace)}"
    )
