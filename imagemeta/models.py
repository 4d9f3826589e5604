from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Orientation(Enum):
    """
    EXIF orientation: the rotation/mirroring needed to display an image upright.

    Numeric codes are kept in an explicit table rather than in the member
    values, so the enum can never be confused with its wire representation.
    """
    NORMAL = 'normal'
    MIRRORED = 'mirrored'
    UPSIDE_DOWN = 'upside_down'
    UPSIDE_DOWN_MIRRORED = 'upside_down_mirrored'
    QUARTER_ROTATION_CCW_MIRRORED = 'quarter_rotation_ccw_mirrored'
    QUARTER_ROTATION_CCW = 'quarter_rotation_ccw'
    QUARTER_ROTATION_CW_MIRRORED = 'quarter_rotation_cw_mirrored'
    QUARTER_ROTATION_CW = 'quarter_rotation_cw'

    @property
    def code(self) -> int:
        return _CODE_BY_ORIENTATION[self]

    @classmethod
    def from_code(cls, code: int) -> "Orientation":
        """Maps an EXIF orientation code (1-8). Raises ValueError otherwise."""
        try:
            return _ORIENTATION_BY_CODE[code]
        except (KeyError, TypeError):
            raise ValueError(f"Invalid orientation code: {code!r}") from None


_CODE_BY_ORIENTATION = {
    Orientation.NORMAL: 1,
    Orientation.MIRRORED: 2,
    Orientation.UPSIDE_DOWN: 3,
    Orientation.UPSIDE_DOWN_MIRRORED: 4,
    Orientation.QUARTER_ROTATION_CCW_MIRRORED: 5,
    Orientation.QUARTER_ROTATION_CCW: 6,
    Orientation.QUARTER_ROTATION_CW_MIRRORED: 7,
    Orientation.QUARTER_ROTATION_CW: 8,
}
_ORIENTATION_BY_CODE = {code: o for o, code in _CODE_BY_ORIENTATION.items()}


@dataclass(frozen=True)
class FileAttributes:
    """
    OS-level attributes of a source file.
    """
    filename: str           # base name only
    size: int               # bytes

    # UTC, only when the platform exposes them. Not part of equality:
    # they depend on how the file got onto disk, not on its content.
    created_time: Optional[datetime] = field(default=None, compare=False)
    modified_time: Optional[datetime] = field(default=None, compare=False)


@dataclass(frozen=True)
class ImageAttributes:
    """
    Fields of interest from the embedded EXIF container. Each is independent.
    """
    orientation: Optional[Orientation] = None
    capture_time: Optional[datetime] = None   # naive, camera local time
    camera_model: Optional[str] = None
    camera_serial: Optional[str] = None


@dataclass(frozen=True)
class MetadataRecord:
    """
    Everything written to a sidecar for one source file.
    Serialized flat: file attributes first, then image attributes.
    """
    file: FileAttributes
    image: ImageAttributes = field(default_factory=ImageAttributes)

    @property
    def filename(self) -> str:
        return self.file.filename

    @property
    def size(self) -> int:
        return self.file.size
