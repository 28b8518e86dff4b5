from __future__ import annotations

import pytest

from telegram_reports.models.entities import ExceptionReport, ReportLevel
from telegram_reports.services.formatting import (
    build_exception_content,
    build_report,
    get_report_signal,
    get_report_title,
)


@pytest.mark.parametrize(
    "level, glyph",
    [
        (ReportLevel.INFORMATION, "ℹ"),
        (ReportLevel.WARNING, "⚠"),
        (ReportLevel.DEBUG, "\U0001f47e"),
        (ReportLevel.SUCCESS, "✅"),
        (ReportLevel.ERROR, "\U0001f6a9"),
        (ReportLevel.CRITICAL_ERROR, "\U0001f525"),
    ],
)
def test_signal_for_each_level(level, glyph):
    assert get_report_signal(level) == glyph
    assert get_report_signal(level.value) == glyph


def test_unknown_level_falls_back_to_information_signal():
    assert get_report_signal("NOTICE") == "ℹ"
    assert get_report_signal("") == "ℹ"


def test_default_titles():
    assert get_report_title(ReportLevel.WARNING) == "Warning!"
    assert get_report_title(ReportLevel.CRITICAL_ERROR) == "Critical Error!"
    assert get_report_title("CRITICAL_ERROR", "") == "Critical Error!"
    assert get_report_title("INFORMATION", None) == "Information!"


def test_default_title_for_unknown_level_uses_its_name():
    assert get_report_title("DISK_ALMOST_FULL") == "Disk Almost Full!"
    assert get_report_title("o'clock_2nd") == "O'clock 2nd!"


def test_custom_title_is_used_verbatim():
    assert get_report_title(ReportLevel.ERROR, "nightly <b>job</b> ") == "nightly <b>job</b> "


def test_build_report_is_byte_exact():
    out = build_report(ReportLevel.SUCCESS, "Build finished")
    assert out == "<strong>✅ Success!</strong>\n\nBuild finished"

    out = build_report("DEBUG", "x=1", "Probe")
    assert out == "<strong>\U0001f47e Probe</strong>\n\nx=1"


def test_exception_content_order_and_labels():
    report = ExceptionReport(message="disk full", code=28, file="/app/run.sh", line=42, trace="#0 ...")
    content = build_exception_content(report)

    assert content.startswith("Error: disk full\n")
    lines = content.split("\n")
    assert lines[0] == "Error: disk full"
    assert lines[1] == "Code: 28"
    assert lines[2] == "File: /app/run.sh:42"
    assert "Stack Trace:" in lines
    assert content.endswith("Stack Trace:\n\n#0 ...")


def test_exception_content_escapes_markup_from_trace():
    report = ExceptionReport(
        message="bad <value> & more",
        code=0,
        file="<stdin>",
        line=1,
        trace='File "<stdin>", line 1, in <module>',
    )
    content = build_exception_content(report)

    assert "Error: bad &lt;value&gt; &amp; more" in content
    assert "File: &lt;stdin&gt;:1" in content
    assert "in &lt;module&gt;" in content
    assert "<module>" not in content
