"""
Terminal stand-in for the scanning popup.

The prompt is answered on a daemon thread so the event loop keeps polling the
clipboard while the user plays; closing the dialog resolves to ``"yes"``
(Another) or ``"no"`` (Finished).
"""

import asyncio
import sys
import threading

ANOTHER = "yes"
FINISHED = "no"

MESSAGE = "Click the description, then all influences"


class TerminalDialog:
    """Asks Finished / Another on the terminal."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    async def open(self) -> str:
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def _resolve(answer):
            if not future.done():
                future.set_result(answer)

        def _prompt():
            answer = self._ask()
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve, answer)

        threading.Thread(target=_prompt, name="scan-dialog", daemon=True).start()
        return await future

    def _ask(self) -> str:
        self.stdout.write(f"\n{MESSAGE}\n[a]nother / [F]inished: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if line.strip().lower() in ("a", "another"):
            return ANOTHER
        return FINISHED
