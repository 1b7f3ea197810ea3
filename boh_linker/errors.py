"""Exceptions raised by the linker."""


class LinkerError(Exception):
    """Base class for all linker failures."""


class ConfigurationError(LinkerError):
    """A required setting is missing or invalid."""


class NotFoundError(LinkerError):
    """A note, folder or tag vanished from the store."""

    def __init__(self, path: str):
        super().__init__(f"Not found: {path}")
        self.path = path


class StoreError(LinkerError):
    """The Joplin Data API call failed."""


class ClipboardError(LinkerError):
    """A clipboard tool hung or failed."""
