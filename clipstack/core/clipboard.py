"""Access to the operating system clipboard."""

import logging
from abc import ABC, abstractmethod

import pyperclip

from .exceptions import ClipboardReadError, ClipboardWriteError

logger = logging.getLogger(__name__)


class ClipboardPort(ABC):
    """Contract for clipboard operations used by the monitor."""

    @abstractmethod
    def read(self) -> str:
        """Return the current clipboard text.

        Raises:
            ClipboardReadError: If the clipboard is inaccessible or holds no text.
        """
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the clipboard contents with text.

        Raises:
            ClipboardWriteError: If the operating system rejects the write.
        """
        ...


class PyperclipClipboard(ClipboardPort):
    """Clipboard backed by pyperclip"""

    def read(self) -> str:
        try:
            content = pyperclip.paste()
        except (pyperclip.PyperclipException, OSError) as e:
            raise ClipboardReadError("Failed to read clipboard", original_error=e) from e

        if not isinstance(content, str):
            raise ClipboardReadError(f"Clipboard holds no text (got {type(content).__name__})")
        return content

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except (pyperclip.PyperclipException, OSError) as e:
            logger.debug("pyperclip.copy failed: %s", e)
            raise ClipboardWriteError("Failed to set clipboard", original_error=e) from e
