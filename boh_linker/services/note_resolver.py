"""
Note Resolver — picks the note each paste should be merged into.

While a document is active every paste goes to it.  Otherwise (first paste,
after "Another", or when the active note was deleted) the target is chosen
by priority:

  1. the selected note, if its title equals the paste title
  2. an existing note titled exactly like the paste
  3. the selected note, if it is blank
  4. a new note next to the selected note
  5. a new note inside the selected folder
  6. a new note in the default location
"""

import logging
from dataclasses import dataclass

from boh_linker.errors import NotFoundError
from boh_linker.services.joplin_client import NOTE_FIELDS, JoplinService
from boh_linker.services.paste_parser import Paste

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """The note being built; ``id`` is ``None`` until it is first saved."""
    id: str | None = None
    title: str = ""
    body: str = ""
    parent_id: str | None = None

    @classmethod
    def from_note(cls, note: dict) -> "Document":
        return cls(
            id=note["id"],
            title=note.get("title") or "",
            body=note.get("body") or "",
            parent_id=note.get("parent_id"),
        )


class Workspace:
    """The note and folder the user pointed the scan at, re-read on demand."""

    def __init__(self, client: JoplinService, note_id=None, folder_id=None):
        self.client = client
        self.note_id = note_id
        self.folder_id = folder_id

    def selected_note(self) -> dict | None:
        if not self.note_id:
            return None
        try:
            return self.client.get_note(self.note_id)
        except NotFoundError:
            logger.info("Selected note %s no longer exists", self.note_id)
            return None

    def selected_folder(self) -> dict | None:
        if not self.folder_id:
            return None
        try:
            return self.client.get_folder(self.folder_id)
        except NotFoundError:
            logger.info("Selected notebook %s no longer exists", self.folder_id)
            return None


class NoteResolver:
    """Decides which document a paste is read from and written back to."""

    def __init__(self, client: JoplinService, workspace: Workspace):
        self.client = client
        self.workspace = workspace

    def resolve(self, paste: Paste, active_id: str | None = None) -> Document:
        if active_id:
            try:
                return Document.from_note(self.client.get_note(active_id))
            except NotFoundError:
                logger.info("Active note %s vanished, starting a new one", active_id)
        return self._start(paste)

    def _start(self, paste: Paste) -> Document:
        selected = self.workspace.selected_note()
        if selected and (selected.get("title") or "") == paste.title:
            return Document.from_note(selected)

        match = self._find_by_title(paste.title)
        if match:
            logger.info("Reusing existing note '%s' (%s)", paste.title, match["id"])
            return Document.from_note(match)

        if selected:
            if not selected.get("title") and not selected.get("body"):
                return Document.from_note(selected)
            return Document(parent_id=selected.get("parent_id"))

        folder = self.workspace.selected_folder()
        if folder:
            return Document(parent_id=folder["id"])
        return Document()

    def _find_by_title(self, title: str) -> dict | None:
        if not title:
            return None
        query = title.replace('"', " ")
        for note in self.client.search(f'title:"{query}"', fields=NOTE_FIELDS):
            if note.get("title") == title:
                return note
        return None
