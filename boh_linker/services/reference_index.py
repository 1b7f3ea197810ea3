"""
Reference Index — in-memory cache of influence notes and their tags.

Maps influence titles to the ids of their singleton notes in the influence
notebook, and tag titles to tag ids (only for tags named after a known
influence).  The cache is rebuilt wholesale at the start of every scan so
notes moved or deleted in the meantime are picked up; a stale entry is
otherwise tolerated and fixed lazily by search-then-create.
"""

import logging

from boh_linker.services.joplin_client import JoplinService
from boh_linker.services.paste_parser import Paste

logger = logging.getLogger(__name__)


class ReferenceIndex:
    """Title → id lookups for influence notes and tags."""

    def __init__(self, client: JoplinService, folder_name: str):
        self.client = client
        self.folder_name = folder_name
        self.folder_id: str | None = None
        self.influences: dict[str, str] = {}
        self.tags: dict[str, str] = {}

    def rebuild(self) -> None:
        """Reload both mappings from the store, recreating the notebook if needed."""
        self.influences.clear()
        self.tags.clear()

        folders = self.client.search(self.folder_name, type_="folder", limit=1)
        if folders:
            self.folder_id = folders[0]["id"]
        else:
            logger.info("Unable to find '%s' notebook, recreating", self.folder_name)
            self.folder_id = self.client.create_folder(self.folder_name)["id"]

        for note in self.client.folder_notes(self.folder_id):
            self.influences[note["title"]] = note["id"]

        for tag in self.client.all_tags():
            if tag["title"] in self.influences:
                self.tags[tag["title"]] = tag["id"]

        logger.info(
            "Reference index rebuilt: %d influence(s), %d tag(s).",
            len(self.influences),
            len(self.tags),
        )

    # ── Influence notes ───────────────────────────────────────────────

    def resolve_influence_note(self, paste: Paste) -> str:
        """Id of the influence note for *paste*, creating it on first sight."""
        note_id = self.influences.get(paste.title)
        if note_id:
            return note_id

        note = self.client.create_note(paste.title, paste.body, parent_id=self.folder_id)
        self.influences[paste.title] = note["id"]
        return note["id"]

    # ── Tags ──────────────────────────────────────────────────────────

    def resolve_tag(self, title: str) -> str:
        tag_id = self.tags.get(title)
        if tag_id:
            return tag_id

        found = self.client.search(title, type_="tag", limit=1)
        if found:
            tag_id = found[0]["id"]
        else:
            tag_id = self.client.create_tag(title)["id"]
        self.tags[title] = tag_id
        return tag_id

    def attach_tag(self, tag_id: str, note_id: str) -> None:
        self.client.tag_note(tag_id, note_id)

    def tag_note(self, title: str, note_id: str) -> None:
        """Attach the tag named *title* to a note, creating the tag if needed."""
        self.attach_tag(self.resolve_tag(title), note_id)
