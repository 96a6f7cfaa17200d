from __future__ import annotations

"""
Manual Page Generator.

Renders a roff(7) man page from the argparse parser definition.
"""

import argparse
import datetime
from typing import List

from wdir import __version__


def render_manpage(parser: argparse.ArgumentParser, section: int = 1) -> str:
    """
    Build the man page source for a parser.

    Options whose help is suppressed are omitted.

    Args:
        parser: Fully configured CLI parser.
        section: Manual section number.

    Returns:
        str: roff source, newline-terminated.
    """
    prog = parser.prog
    date = datetime.date.today().isoformat()

    lines: List[str] = [
        f'.TH {prog.upper()} {section} "{date}" "{prog} {__version__}" "User Commands"',
        ".SH NAME",
        f"{prog} \\- {_escape(parser.description or '')}",
        ".SH SYNOPSIS",
        f"\\fB{prog}\\fR {_escape(_synopsis(parser))}",
    ]

    if parser.description:
        lines += [".SH DESCRIPTION", _escape(parser.description)]

    positionals = [a for a in parser._actions if not a.option_strings and _visible(a)]
    optionals = [a for a in parser._actions if a.option_strings and _visible(a)]

    if positionals:
        lines.append(".SH ARGUMENTS")
        for action in positionals:
            lines += [".TP", f"\\fI{_escape(action.metavar or action.dest)}\\fR", _help(action)]

    if optionals:
        lines.append(".SH OPTIONS")
        for action in optionals:
            lines += [".TP", _option_heading(action), _help(action)]

    return "\n".join(lines) + "\n"


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _visible(action: argparse.Action) -> bool:
    return action.help != argparse.SUPPRESS


def _synopsis(parser: argparse.ArgumentParser) -> str:
    usage = " ".join(parser.format_usage().split())
    prefix = f"usage: {parser.prog}"
    return usage[len(prefix):].strip() if usage.startswith(prefix) else usage


def _option_heading(action: argparse.Action) -> str:
    flags = ", ".join(f"\\fB{_escape(opt)}\\fR" for opt in action.option_strings)
    if action.nargs == 0:
        return flags
    metavar = action.metavar or action.dest.upper()
    return f"{flags} \\fI{_escape(metavar)}\\fR"


def _help(action: argparse.Action) -> str:
    return _escape(action.help or "")


def _escape(text: str) -> str:
    """Escape text for roff: backslashes, hyphens and leading control characters."""
    out = text.replace("\\", "\\e").replace("-", "\\-")
    if out.startswith((".", "'")):
        out = "\\&" + out
    return out
