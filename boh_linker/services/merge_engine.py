"""
Merge Engine — folds one paste into the current document.

Rules, checked in order:

  - empty title       → the paste becomes the document
  - body already seen → nothing changes (double click)
  - same title        → the paste body is appended
  - uninfluenced      → an emphasised heading and the body are appended
  - anything else     → the paste is an influence: linked and tagged
"""

import logging
from dataclasses import replace

from boh_linker.services import influence_links
from boh_linker.services.note_resolver import Document
from boh_linker.services.paste_parser import Paste
from boh_linker.services.reference_index import ReferenceIndex

logger = logging.getLogger(__name__)


def merge(
    document: Document,
    paste: Paste,
    index: ReferenceIndex,
    uninfluenced: list[str],
) -> Document:
    """Return the document with *paste* merged in.

    Only the influence rule has side effects: it creates (or reuses) the
    influence note and tags the document, both through *index*.
    """
    if document.title == "":
        return replace(document, title=paste.title, body=paste.body)

    if paste.body in document.body:
        logger.debug("Skipping duplicate paste '%s'", paste.title)
        return document

    if document.title == paste.title:
        return replace(document, body=_append(document.body, paste.body))

    if paste.title in uninfluenced:
        return replace(
            document, body=_append(document.body, f"*{paste.title}*\n\n{paste.body}")
        )

    influence_id = index.resolve_influence_note(paste)
    body = influence_links.add_influence(document.body, paste.title, influence_id)
    if document.id:
        index.tag_note(paste.title, document.id)
    else:
        logger.warning("Cannot tag unsaved note with '%s'", paste.title)
    logger.info("Linked influence '%s' (%s)", paste.title, influence_id)
    return replace(document, body=body)


def _append(body: str, text: str) -> str:
    if body == "":
        return text
    return f"{body}\n\n{text}"
