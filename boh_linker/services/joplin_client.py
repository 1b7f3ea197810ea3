"""Joplin Data API client.

Handles all direct interactions with the running Joplin instance: searching,
reading and writing notes, folders and tags, and walking paginated listings.
"""

import logging

import requests

from boh_linker import config
from boh_linker.errors import ConfigurationError, NotFoundError, StoreError

logger = logging.getLogger(__name__)

NOTE_FIELDS = ["id", "title", "body", "parent_id"]


class JoplinService:
    """Manages all Joplin Data API operations for the linker."""

    def __init__(self, base_url=None, token=None, session=None):
        self.base_url = (base_url or config.JOPLIN_URL).rstrip("/")
        self.token = token if token is not None else config.JOPLIN_TOKEN
        self.session = session or requests.Session()

    def _request(self, method, path, query=None, body=None):
        if not self.token:
            raise ConfigurationError(
                "JOPLIN_TOKEN is not set. Add it to your .env file or environment."
            )
        params = {"token": self.token}
        for key, value in (query or {}).items():
            if isinstance(value, (list, tuple)):
                value = ",".join(value)
            params[key] = value

        url = f"{self.base_url}/{'/'.join(path)}"
        try:
            resp = self.session.request(
                method, url, params=params, json=body, timeout=config.JOPLIN_TIMEOUT
            )
        except requests.RequestException as exc:
            raise StoreError(f"{method} {'/'.join(path)} failed: {exc}") from exc

        if resp.status_code == 404:
            raise NotFoundError("/".join(path))
        try:
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise StoreError(f"{method} {'/'.join(path)} failed: {exc}") from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise StoreError(f"{method} {'/'.join(path)} returned invalid JSON") from exc

    def get(self, path, query=None):
        return self._request("GET", path, query=query)

    def post(self, path, body, query=None):
        return self._request("POST", path, query=query, body=body)

    def put(self, path, body, query=None):
        return self._request("PUT", path, query=query, body=body)

    def paginated_get(self, path, query=None):
        """Collect every item of a listing, following ``has_more`` page by page."""
        items = []
        page = 1
        while True:
            result = self.get(
                path, {**(query or {}), "page": page, "limit": config.JOPLIN_PAGE_SIZE}
            )
            items.extend(result.get("items", []))
            if not result.get("has_more"):
                return items
            page += 1

    # ─── Search ─────────────────────────────────────────────────────────

    def search(self, query, type_="note", limit=None, fields=None):
        """Run a Joplin search for notes, folders or tags; returns the first page."""
        params = {"query": query, "type": type_}
        if limit:
            params["limit"] = limit
        if fields:
            params["fields"] = fields
        return self.get(["search"], params).get("items", [])

    # ─── Notes ──────────────────────────────────────────────────────────

    def get_note(self, note_id, fields=None):
        return self.get(["notes", note_id], {"fields": fields or NOTE_FIELDS})

    def create_note(self, title, body, parent_id=None):
        payload = {"title": title, "body": body}
        if parent_id:
            payload["parent_id"] = parent_id
        note = self.post(["notes"], payload)
        logger.info("Created note '%s' (%s)", title, note.get("id"))
        return note

    def update_note(self, note_id, title, body):
        return self.put(["notes", note_id], {"title": title, "body": body})

    # ─── Folders ────────────────────────────────────────────────────────

    def get_folder(self, folder_id):
        return self.get(["folders", folder_id], {"fields": ["id", "title", "parent_id"]})

    def create_folder(self, title):
        folder = self.post(["folders"], {"title": title})
        logger.info("Created notebook '%s' (%s)", title, folder.get("id"))
        return folder

    def folder_notes(self, folder_id):
        """Every note (id and title) directly inside a folder."""
        return self.paginated_get(
            ["folders", folder_id, "notes"], {"fields": ["id", "title"]}
        )

    # ─── Tags ───────────────────────────────────────────────────────────

    def all_tags(self):
        return self.paginated_get(["tags"], {"fields": ["id", "title"]})

    def create_tag(self, title):
        tag = self.post(["tags"], {"title": title})
        logger.info("Created tag '%s' (%s)", title, tag.get("id"))
        return tag

    def tag_note(self, tag_id, note_id):
        return self.post(["tags", tag_id, "notes"], {"id": note_id})
