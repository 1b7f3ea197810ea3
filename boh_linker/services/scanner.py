"""
Scan loop — polls the clipboard and merges every new capture into a note.

One scan is one ``ScanSession``: a freshly rebuilt reference index plus the
id of the active document.  Each round clears the clipboard, opens the
dialog, and polls until the dialog closes.  "Another" starts a new document
in the same session; "Finished" ends it.

Only one capture is handled at a time: the next clipboard check is scheduled
after the current merge has been saved, never on a fixed timer.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from boh_linker.services.joplin_client import JoplinService
from boh_linker.services.merge_engine import merge
from boh_linker.services.note_resolver import Document, NoteResolver
from boh_linker.services.paste_parser import parse_paste
from boh_linker.services.reference_index import ReferenceIndex
from boh_linker.services.scan_dialog import ANOTHER

logger = logging.getLogger(__name__)


@dataclass
class ScanSession:
    """Mutable state owned by a single scan."""
    client: JoplinService
    index: ReferenceIndex
    resolver: NoteResolver
    uninfluenced: list[str] = field(default_factory=list)
    document_id: str | None = None

    def new_document(self) -> None:
        self.document_id = None

    def handle_paste(self, raw: str) -> Document | None:
        """Parse, resolve, merge and save one clipboard capture."""
        paste = parse_paste(raw)
        if paste is None:
            return None

        document = self.resolver.resolve(paste, self.document_id)
        merged = merge(document, paste, self.index, self.uninfluenced)
        saved = self._persist(document, merged)
        self.document_id = saved.id
        return saved

    def _persist(self, before: Document, after: Document) -> Document:
        if after.id is None:
            note = self.client.create_note(after.title, after.body, parent_id=after.parent_id)
            return Document(
                id=note["id"], title=after.title, body=after.body, parent_id=after.parent_id
            )
        if after != before:
            self.client.update_note(after.id, after.title, after.body)
            logger.info("Updated note '%s' (%s)", after.title, after.id)
        return after


class LinkingScanner:
    """Drives clipboard polling and the Finished / Another dialog."""

    def __init__(
        self,
        client: JoplinService,
        clipboard,
        dialog,
        resolver: NoteResolver,
        folder_name: str,
        uninfluenced: list[str],
        delay_ms: int,
    ):
        self.client = client
        self.clipboard = clipboard
        self.dialog = dialog
        self.resolver = resolver
        self.folder_name = folder_name
        self.uninfluenced = uninfluenced
        self.delay = max(1, delay_ms) / 1000

    async def run(self) -> ScanSession:
        """Run one scan until the user picks Finished."""
        session = ScanSession(
            client=self.client,
            index=ReferenceIndex(self.client, self.folder_name),
            resolver=self.resolver,
            uninfluenced=list(self.uninfluenced),
        )
        await asyncio.to_thread(session.index.rebuild)

        while True:
            result = await self.clipboard_scan(session.handle_paste)
            if result != ANOTHER:
                logger.info("Scan finished.")
                return session
            logger.info("Starting another note.")
            session.new_document()

    async def clipboard_scan(self, handler) -> str:
        """Poll the clipboard into *handler* until the dialog closes.

        Returns the dialog's action id.  A failing handler aborts the round
        and its exception is raised here.
        """
        await asyncio.to_thread(self.clipboard.write_text, "")
        stop = asyncio.Event()
        poller = asyncio.create_task(self._poll(handler, stop))
        dialog = asyncio.create_task(self.dialog.open())

        done, _ = await asyncio.wait({poller, dialog}, return_when=asyncio.FIRST_COMPLETED)
        if poller in done:
            dialog.cancel()
            # _poll only returns early by raising
            poller.result()

        stop.set()
        await poller
        return dialog.result()

    async def _poll(self, handler, stop: asyncio.Event) -> None:
        previous = ""
        while not stop.is_set():
            current = await asyncio.to_thread(self.clipboard.read_text)
            if current != previous:
                logger.debug("Clipboard changed (%d chars)", len(current))
                await asyncio.to_thread(handler, current)
                previous = current
            try:
                await asyncio.wait_for(stop.wait(), timeout=self.delay)
            except asyncio.TimeoutError:
                pass
