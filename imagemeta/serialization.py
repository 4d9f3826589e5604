"""
JSON sidecar representation of a MetadataRecord.

The sidecar is a flat object. Absent optional fields are left out entirely,
never written as null; `filename` and `size` are always present.
"""
import json
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Dict, Optional

from . import config
from .exceptions import RecordFormatError, SidecarWriteError
from .models import FileAttributes, ImageAttributes, MetadataRecord, Orientation

MAX_SIZE = 2**64 - 1


def sidecar_path_for(source: Path) -> Path:
    """<parent>/<stem>.json next to the source file."""
    source = Path(source)
    return source.with_name(source.stem + config.SIDECAR_SUFFIX)


def serialize_record(record: MetadataRecord) -> str:
    f = record.file
    img = record.image

    # Key order is fixed so re-runs produce identical bytes.
    data: Dict[str, Any] = {
        'filename': f.filename,
        'size': f.size,
    }
    if f.created_time is not None:
        data['created_time'] = _format_utc(f.created_time)
    if f.modified_time is not None:
        data['modified_time'] = _format_utc(f.modified_time)
    if img.orientation is not None:
        data['orientation'] = img.orientation.code
    if img.capture_time is not None:
        data['capture_time'] = img.capture_time.isoformat()
    if img.camera_model is not None:
        data['camera_model'] = img.camera_model
    if img.camera_serial is not None:
        data['camera_serial'] = img.camera_serial

    return json.dumps(data, indent=config.JSON_INDENT, ensure_ascii=False)


def deserialize_record(text: str) -> MetadataRecord:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordFormatError(f"Malformed sidecar JSON: {e}") from e
    if not isinstance(data, dict):
        raise RecordFormatError(f"Sidecar JSON must be an object, got {type(data).__name__}")

    filename = data.get('filename')
    if not isinstance(filename, str):
        raise RecordFormatError("Field 'filename' is missing or not a string")
    size = data.get('size')
    if not _is_int(size) or not 0 <= size <= MAX_SIZE:
        raise RecordFormatError("Field 'size' is missing or not an unsigned 64-bit integer")

    file_attrs = FileAttributes(
        filename=filename,
        size=size,
        created_time=_parse_utc(data, 'created_time'),
        modified_time=_parse_utc(data, 'modified_time'),
    )
    image_attrs = ImageAttributes(
        orientation=_parse_orientation(data),
        capture_time=_parse_naive(data, 'capture_time'),
        camera_model=_optional_str(data, 'camera_model'),
        camera_serial=_optional_str(data, 'camera_serial'),
    )
    return MetadataRecord(file=file_attrs, image=image_attrs)


def write_sidecar(record: MetadataRecord, path: Path):
    """Writes (or overwrites) the sidecar at path."""
    # Encode before opening so a bad record never truncates an existing sidecar
    try:
        data = serialize_record(record).encode('utf-8')
    except UnicodeError as e:
        raise SidecarWriteError(f"Cannot encode sidecar {path}: {e}") from e
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise SidecarWriteError(f"Cannot write sidecar {path}: {e}") from e


def read_sidecar(path: Path) -> MetadataRecord:
    try:
        text = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise RecordFormatError(f"Cannot read sidecar {path}: {e}") from e
    return deserialize_record(text)


# --- Field helpers ---

def _is_int(value: Any) -> bool:
    # bool is an int subclass, but `true` is not a valid size or code
    return isinstance(value, int) and not isinstance(value, bool)


def _format_utc(dt: datetime) -> str:
    return dt.astimezone(UTC).isoformat().replace('+00:00', 'Z')


def _parse_datetime(data: Dict[str, Any], key: str) -> Optional[datetime]:
    if key not in data:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise RecordFormatError(f"Field '{key}' must be a string")
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise RecordFormatError(f"Field '{key}' is not a valid timestamp: {value!r}") from e


def _parse_utc(data: Dict[str, Any], key: str) -> Optional[datetime]:
    dt = _parse_datetime(data, key)
    if dt is None:
        return None
    if dt.tzinfo is None:
        raise RecordFormatError(f"Field '{key}' must carry a UTC offset")
    return dt.astimezone(UTC)


def _parse_naive(data: Dict[str, Any], key: str) -> Optional[datetime]:
    dt = _parse_datetime(data, key)
    if dt is not None and dt.tzinfo is not None:
        raise RecordFormatError(f"Field '{key}' must not carry a UTC offset")
    return dt


def _parse_orientation(data: Dict[str, Any]) -> Optional[Orientation]:
    if 'orientation' not in data:
        return None
    code = data['orientation']
    if not _is_int(code):
        raise RecordFormatError("Field 'orientation' must be an integer")
    try:
        return Orientation.from_code(code)
    except ValueError as e:
        raise RecordFormatError(str(e)) from e


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    if key not in data:
        return None
    value = data[key]
    if not isinstance(value, str):
        raise RecordFormatError(f"Field '{key}' must be a string")
    return value
