"""
Shared fixtures: an in-memory stand-in for the Joplin Data API.
"""

import itertools

import pytest

from boh_linker.errors import NotFoundError


class FakeJoplin:
    """Implements the JoplinService calls the linker makes, backed by dicts."""

    def __init__(self):
        self._ids = itertools.count(1)
        self.notes = {}
        self.folders = {}
        self.tags = {}
        self.note_tags = []
        self.calls = []

    def _new_id(self, prefix):
        return f"{prefix}{next(self._ids):03d}"

    # Search is exact-title here; Joplin's is fuzzier.
    def search(self, query, type_="note", limit=None, fields=None):
        self.calls.append(("search", type_, query, limit))
        if type_ == "folder":
            pool = self.folders.values()
        elif type_ == "tag":
            pool = self.tags.values()
        else:
            if query.startswith('title:"') and query.endswith('"'):
                query = query[len('title:"'):-1]
            pool = self.notes.values()
        found = [dict(item) for item in pool if item["title"] == query]
        return found[:limit] if limit else found

    def get_note(self, note_id, fields=None):
        if note_id not in self.notes:
            raise NotFoundError(f"notes/{note_id}")
        return dict(self.notes[note_id])

    def create_note(self, title, body, parent_id=None):
        self.calls.append(("create_note", title))
        note = {"id": self._new_id("n"), "title": title, "body": body, "parent_id": parent_id or ""}
        self.notes[note["id"]] = note
        return dict(note)

    def update_note(self, note_id, title, body):
        self.calls.append(("update_note", note_id))
        if note_id not in self.notes:
            raise NotFoundError(f"notes/{note_id}")
        self.notes[note_id].update(title=title, body=body)
        return dict(self.notes[note_id])

    def get_folder(self, folder_id):
        if folder_id not in self.folders:
            raise NotFoundError(f"folders/{folder_id}")
        return dict(self.folders[folder_id])

    def create_folder(self, title):
        self.calls.append(("create_folder", title))
        folder = {"id": self._new_id("f"), "title": title, "parent_id": ""}
        self.folders[folder["id"]] = folder
        return dict(folder)

    def folder_notes(self, folder_id):
        return [
            {"id": n["id"], "title": n["title"]}
            for n in self.notes.values()
            if n["parent_id"] == folder_id
        ]

    def all_tags(self):
        return [dict(t) for t in self.tags.values()]

    def create_tag(self, title):
        self.calls.append(("create_tag", title))
        tag = {"id": self._new_id("t"), "title": title}
        self.tags[tag["id"]] = tag
        return dict(tag)

    def tag_note(self, tag_id, note_id):
        self.note_tags.append((tag_id, note_id))
        return {}

    # ── helpers for arranging tests ──

    def add_folder(self, title):
        return self.create_folder(title)["id"]

    def add_note(self, title, body="", parent_id=""):
        return self.create_note(title, body, parent_id=parent_id)["id"]

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)


@pytest.fixture
def store():
    return FakeJoplin()
