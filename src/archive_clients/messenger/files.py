"""Read-only filesystem access to an unpacked Messenger export."""

from __future__ import annotations

import logging
import mimetypes
import os
import re
from pathlib import Path

from archive_clients.exceptions import MessengerReadError

logger = logging.getLogger(__name__)

ARCHIVE_ROOT_ENV = "MESSENGER_ARCHIVE_ROOT"

MESSAGES_DIR = "messages"
INBOX_DIR = "inbox"
AUTOFILL_FILE = "autofill_information.json"

_PART_RE = re.compile(r"^message_(\d+)\.json$")


class ArchiveFileSystem:
    """Enumerates conversation folders and reads their raw files.

    Args:
        root: The export root (the folder holding ``messages/``). Falls back
            to the MESSENGER_ARCHIVE_ROOT environment variable.
    """

    def __init__(self, root: Path | str | None = None):
        root = root or os.environ.get(ARCHIVE_ROOT_ENV)
        if not root:
            raise MessengerReadError(
                "Archive root is required. "
                f"Pass it directly or set {ARCHIVE_ROOT_ENV} in your environment."
            )
        self.root = Path(root)

    def find_inbox_folder(self) -> Path | None:
        """Locate the inbox whether root is the export, messages/ or inbox/ itself."""
        candidates = [
            self.root / MESSAGES_DIR / INBOX_DIR,
            self.root / INBOX_DIR,
        ]
        if self.root.name == INBOX_DIR:
            candidates.append(self.root)
        for candidate in candidates:
            if candidate.is_dir():
                return candidate
        logger.debug(f"No inbox folder under {self.root}")
        return None

    def list_subfolders(self, folder: Path) -> list[Path]:
        try:
            return sorted(p for p in folder.iterdir() if p.is_dir())
        except OSError as e:
            raise MessengerReadError(f"Failed to list {folder}: {e}") from e

    def read_conversation_parts(self, folder: Path) -> list[str]:
        """Raw text of every message_N.json in ascending N; empty if there are none."""
        numbered: list[tuple[int, Path]] = []
        try:
            for path in folder.iterdir():
                match = _PART_RE.match(path.name)
                if match and path.is_file():
                    numbered.append((int(match.group(1)), path))
            numbered.sort()
            parts = [path.read_text(encoding="utf-8") for _, path in numbered]
        except (OSError, UnicodeDecodeError) as e:
            raise MessengerReadError(
                f"Failed to read conversation parts in {folder}: {e}"
            ) from e
        logger.debug(f"Read {len(parts)} part(s) from {folder.name}")
        return parts

    def read_profile_info(self) -> str | None:
        """Raw text of autofill_information.json, or None if the export has none."""
        for candidate in (
            self.root / MESSAGES_DIR / AUTOFILL_FILE,
            self.root / AUTOFILL_FILE,
        ):
            if candidate.is_file():
                try:
                    return candidate.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    raise MessengerReadError(
                        f"Failed to read {candidate}: {e}"
                    ) from e
        return None

    def read_media(self, relative_path: str) -> bytes:
        """Bytes of an attachment referenced by a message (path relative to root)."""
        path = self._resolve_media_path(relative_path)
        try:
            return path.read_bytes()
        except OSError as e:
            raise MessengerReadError(
                f"Failed to read media {relative_path}: {e}"
            ) from e

    @staticmethod
    def media_type(relative_path: str) -> str:
        mime, _ = mimetypes.guess_type(relative_path)
        return mime or "application/octet-stream"

    def _resolve_media_path(self, relative_path: str) -> Path:
        root = self.root.resolve()
        path = (root / relative_path).resolve()
        if not path.is_relative_to(root):
            raise MessengerReadError(
                f"Media path {relative_path!r} points outside the archive root."
            )
        return path
