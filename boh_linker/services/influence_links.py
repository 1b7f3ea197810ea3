"""
Influence links — the ``[Title](:/id) ⬩`` markers kept on one line of a note.

A note's influence line is the first run of markers in its body: it starts at
the first marker and extends through every marker that directly follows,
separated only by spaces or tabs.  Text after the last ``⬩`` stays where it
is, so new influences are slotted in right after the existing ones.
"""

import re
from dataclasses import dataclass

SEPARATOR = "⬩"

# A single marker: [title](target) followed, on the same line, by the separator.
_MARKER_RE = re.compile(r"\[[^\n]*?\]\([^\n]*?\)[^\n]*?" + SEPARATOR)
_GAP_RE = re.compile(r"[ \t]*")


@dataclass
class LocatedLine:
    """A body cut into the text before, on, and after its influence line."""
    prefix: str
    line: str
    suffix: str


def format_influence(title: str, note_id: str) -> str:
    return f"[{title}](:/{note_id}) {SEPARATOR}"


def locate(body: str) -> LocatedLine | None:
    """Find the influence line in *body*, or ``None`` if it has no markers."""
    first = _MARKER_RE.search(body)
    if not first:
        return None

    end = first.end()
    while True:
        gap = _GAP_RE.match(body, end).end()
        marker = _MARKER_RE.match(body, gap)
        if not marker:
            break
        end = marker.end()

    return LocatedLine(
        prefix=body[: first.start()],
        line=body[first.start():end],
        suffix=body[end:],
    )


def contains_id(line: str, note_id: str) -> bool:
    """True if *note_id* appears anywhere in the influence line.

    Plain substring match: an id that happens to be contained in another id
    also counts as already linked.
    """
    return note_id in line


def append(located: LocatedLine | None, link: str, body: str = "") -> str:
    """Reassemble a body with *link* added to the end of its influence line.

    Without an influence line the link is prepended to *body* as a new one.
    """
    if located is None:
        if body == "":
            return link
        return f"{link}\n\n{body}"
    return f"{located.prefix}{located.line} {link}{located.suffix}"


def add_influence(body: str, title: str, note_id: str) -> str:
    """Link *note_id* into *body* unless the influence line already has it."""
    located = locate(body)
    if located is not None and contains_id(located.line, note_id):
        return body
    return append(located, format_influence(title, note_id), body)
