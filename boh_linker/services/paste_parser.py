"""
Paste Parser — splits a raw clipboard capture into a title and a body.

Game captures look like::

    Title
    <blank line>
    Description, possibly over several lines

Anything else (a stray copy from another program, a half-selected line) is
logged and ignored so a forgotten scan never corrupts a note.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paste:
    """One parsed clipboard capture."""
    title: str
    body: str


def parse_paste(raw: str) -> Paste | None:
    """Return the parsed capture, or ``None`` when *raw* is not shaped like one."""
    lines = raw.replace("\r\n", "\n").split("\n")
    if len(lines) < 3 or lines[1] != "":
        logger.warning("Ignoring malformed clipboard: %r", raw[:200])
        return None
    return Paste(title=lines[0], body="\n".join(lines[2:]))
