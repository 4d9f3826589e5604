import logging
import os
import stat
from datetime import datetime, UTC
from pathlib import Path
from typing import Optional

from ..exceptions import NotAFileError, FileAttributeError
from ..models import FileAttributes


class FileAttributeReader:
    """
    Reads OS-level file attributes into a FileAttributes record.

    Only regular files are accepted. Timestamps are best effort: a platform
    that does not report one yields an absent field and a warning.
    """

    def read(self, path: Path) -> FileAttributes:
        path = Path(path)
        try:
            # Follows symlinks, so a dangling link surfaces as FileNotFoundError
            st = path.stat()
        except (FileNotFoundError, NotADirectoryError):
            raise NotAFileError(path) from None
        except ValueError:
            # e.g. an embedded null byte; no file can have this name
            raise NotAFileError(path) from None
        except OSError as e:
            raise FileAttributeError(f"Cannot read attributes of {path}: {e}") from e

        if not stat.S_ISREG(st.st_mode):
            raise NotAFileError(path)

        return FileAttributes(
            filename=_lossy_name(path),
            size=st.st_size,
            created_time=self._platform_time(st, 'st_birthtime', 'created', path),
            modified_time=self._platform_time(st, 'st_mtime', 'modified', path),
        )

    def _platform_time(self, st: os.stat_result, attr: str, label: str, path: Path) -> Optional[datetime]:
        ts = getattr(st, attr, None)
        if ts is None:
            logging.warning(f"Reading the time {label} is not supported for file: {path}")
            return None
        try:
            return datetime.fromtimestamp(ts, tz=UTC)
        except (OverflowError, OSError, ValueError):
            logging.warning(f"Time {label} out of range for file: {path}")
            return None


def _lossy_name(path: Path) -> str:
    """Base name as valid text; undecodable bytes become U+FFFD."""
    return os.fsencode(path.name).decode('utf-8', 'replace')
