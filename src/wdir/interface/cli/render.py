from __future__ import annotations

"""
Terminal Output Formatting.

Converts MatchedEntry and AggregateStats values into the text lines printed
by the CLI. Tags are coloured through rich styles unless raw output is requested.
"""

from rich.color import ColorSystem
from rich.style import Style

from wdir.domain.traversal_models import AggregateStats, MatchedEntry

FILE_TAG = "<FILE>"
DIR_TAG = "<DIR>"

FILE_STYLE = Style.parse("bold green")
DIR_STYLE = Style.parse("bold magenta")


def _tag(label: str, style: Style, raw: bool) -> str:
    if raw:
        return label
    # 8-colour SGR codes regardless of the attached terminal.
    return style.render(label, color_system=ColorSystem.STANDARD)


def format_entry(entry: MatchedEntry, raw: bool = False) -> str:
    """
    Render one entry line.

    Files: '<FILE>\\t<path>\\t<size> bytes'. Directories: '<DIR>\\t<path>'.
    """
    if entry.is_file:
        return f"{_tag(FILE_TAG, FILE_STYLE, raw)}\t{entry.absolute_path}\t{entry.size_bytes} bytes"
    return f"{_tag(DIR_TAG, DIR_STYLE, raw)}\t{entry.absolute_path}"


def format_summary(stats: AggregateStats) -> str:
    """Render the two-line trailing summary (without the final newline)."""
    return (
        f"\t\t{stats.file_count} File(s)\t{stats.total_bytes} bytes\n"
        f"\t\t{stats.directory_count} Dir(s)"
    )
