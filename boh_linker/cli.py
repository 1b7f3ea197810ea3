"""
CLI entry point for the Book of Hours linker.

Usage:
  boh-linker scan                       # New note in the default notebook
  boh-linker scan --note <id>           # Fill / continue from a selected note
  boh-linker scan --folder <id>         # New note inside a notebook
"""

import argparse
import logging
import sys

from boh_linker.errors import LinkerError
from boh_linker.orchestrator import LinkingAgent

logger = logging.getLogger(__name__)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        prog="boh-linker",
        description="Book of Hours linker — build Joplin notes from clipboard captures.",
    )
    parser.add_argument("--url", default=None, help="Joplin Data API URL (overrides JOPLIN_URL).")
    parser.add_argument("--token", default=None, help="Joplin API token (overrides JOPLIN_TOKEN).")

    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Watch the clipboard and link captures into a note.")
    scan.add_argument("--note", default=None, help="Id of the selected note.")
    scan.add_argument("--folder", default=None, help="Id of the selected notebook.")
    scan.add_argument("--delay", type=int, default=None, help="Time between clipboard checks (ms).")
    scan.add_argument("--folder-name", default=None, help="Influence notebook name.")
    scan.add_argument(
        "--uninfluenced",
        default=None,
        help="Semicolon separated titles copied in as text instead of linked.",
    )

    args = parser.parse_args(argv)
    if args.command == "scan" and args.delay is not None and args.delay < 1:
        parser.error("--delay must be at least 1 ms")

    agent = LinkingAgent(base_url=args.url, token=args.token)

    if args.command == "scan":
        print("Scanning clipboard (choose Finished to stop)…")
        try:
            session = agent.scan(
                note_id=args.note,
                folder_id=args.folder,
                delay_ms=args.delay,
                folder_name=args.folder_name,
                uninfluenced=args.uninfluenced,
            )
        except LinkerError as exc:
            logger.error("Scan aborted: %s", exc)
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        except KeyboardInterrupt:
            print("\nStopped.")
            return
        if session.document_id:
            print(f"Last note → {session.document_id}")


if __name__ == "__main__":
    main()
