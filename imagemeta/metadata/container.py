import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import exifread

from .. import config
from ..exceptions import ContainerError


class FieldKind(Enum):
    """TIFF/EXIF field types, keyed by their on-disk type code."""
    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12

    @classmethod
    def from_type_code(cls, code: int) -> "FieldKind":
        try:
            return cls(code)
        except ValueError:
            return cls.UNDEFINED


class Segment(Enum):
    PRIMARY = 'primary'
    THUMBNAIL = 'thumbnail'


_SEGMENT_IFDS = {
    Segment.PRIMARY: config.PRIMARY_IFDS,
    Segment.THUMBNAIL: config.THUMBNAIL_IFDS,
}


@dataclass(frozen=True)
class RawValue:
    """
    An undecoded tag value. ASCII values hold a single bytes element;
    numeric kinds hold the stored sequence as-is.
    """
    kind: FieldKind
    values: Tuple[Any, ...]

    def first(self) -> Optional[Any]:
        return self.values[0] if self.values else None


class TagLookup:
    """Read-only view over the tags exifread found in one file."""

    def __init__(self, tags: Dict[str, Any]):
        self._tags = tags

    def get(self, tag: str, segment: Segment = Segment.PRIMARY) -> Optional[RawValue]:
        for ifd in _SEGMENT_IFDS[segment]:
            ifd_tag = self._tags.get(f"{ifd} {tag}")
            if ifd_tag is not None and hasattr(ifd_tag, 'field_type'):
                return _to_raw_value(ifd_tag)
        return None

    def __len__(self) -> int:
        return len(self._tags)


def _to_raw_value(ifd_tag) -> RawValue:
    kind = FieldKind.from_type_code(ifd_tag.field_type)
    values = ifd_tag.values

    if kind is FieldKind.ASCII:
        # exifread decodes ASCII as UTF-8 when it can and leaves bytes otherwise
        if isinstance(values, str):
            values = values.encode('utf-8')
        return RawValue(kind, (bytes(values),))

    if isinstance(values, (list, tuple)):
        return RawValue(kind, tuple(values))
    if isinstance(values, (bytes, bytearray)):
        return RawValue(kind, tuple(values))
    return RawValue(kind, (values,))


class TagContainerReader:
    """
    Opens the EXIF container of a file via exifread.

    Any failure here is fatal for the file: it is not an image we can
    describe. Pixel data is never decoded.
    """

    def open(self, path: Path) -> TagLookup:
        path = Path(path)
        try:
            with path.open('rb') as f:
                # details=False skips MakerNotes, which we never consult
                tags = exifread.process_file(f, details=False)
        except OSError as e:
            raise ContainerError(f"Cannot open {path}: {e}") from e
        except Exception as e:
            raise ContainerError(f"Corrupt metadata container in {path}: {e}") from e

        if not tags:
            raise ContainerError(f"No EXIF metadata found in {path}")

        logging.debug(f"Read {len(tags)} tags from {path}")
        return TagLookup(tags)
