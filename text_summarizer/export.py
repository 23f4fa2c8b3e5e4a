"""Plain-text rendering of summary results for download."""

from __future__ import annotations

from text_summarizer.summarizer.models import SummaryResult

EXPORT_FILENAME = "summary.txt"


def format_summary_text(result: SummaryResult) -> str:
    lines = ["Summary:", result.summary, "", "Keywords:", ", ".join(result.keywords)]
    lines += ["", "Highlights:"]
    lines += [f"- {highlight}" for highlight in result.highlights]
    return "\n".join(lines) + "\n"
