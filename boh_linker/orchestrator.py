"""
Orchestrator — wires the Joplin client, clipboard and dialog into a scan.
"""

import asyncio
import logging

from boh_linker import config
from boh_linker.services.clipboard import SystemClipboard
from boh_linker.services.joplin_client import JoplinService
from boh_linker.services.note_resolver import NoteResolver, Workspace
from boh_linker.services.scan_dialog import TerminalDialog
from boh_linker.services.scanner import LinkingScanner, ScanSession

logger = logging.getLogger(__name__)


class LinkingAgent:
    """Top-level agent that runs linking scans against one Joplin instance."""

    def __init__(self, base_url: str | None = None, token: str | None = None):
        self.client = JoplinService(base_url=base_url, token=token)
        self._setup_logging()

    def _setup_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, config.LOG_LEVEL, logging.INFO),
            format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            handlers=[
                logging.StreamHandler(),
                logging.FileHandler(config.LOG_FILE),
            ],
        )

    def scan(
        self,
        note_id: str | None = None,
        folder_id: str | None = None,
        delay_ms: int | None = None,
        folder_name: str | None = None,
        uninfluenced: str | None = None,
        clipboard=None,
        dialog=None,
    ) -> ScanSession:
        """
        Run one linking scan:
          1. Rebuild the influence / tag index
          2. Merge clipboard captures into the active note until Finished
          3. Start a fresh note on every Another
        """
        titles = config.split_titles(
            uninfluenced if uninfluenced is not None else config.UNINFLUENCED
        )
        scanner = LinkingScanner(
            client=self.client,
            clipboard=clipboard or SystemClipboard(),
            dialog=dialog or TerminalDialog(),
            resolver=NoteResolver(self.client, Workspace(self.client, note_id, folder_id)),
            folder_name=folder_name or config.INFLUENCE_FOLDER_NAME,
            uninfluenced=titles,
            delay_ms=delay_ms or config.SCAN_DELAY,
        )
        logger.info("Starting linking scan…")
        return asyncio.run(scanner.run())
