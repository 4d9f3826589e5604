"""
Decoders for the individual EXIF fields of interest.

Every decoder takes a TagLookup and returns the typed value or None.
Problems with a single field are logged and absorbed here so that one bad
tag never costs the rest of the record. Only the first element of a
multi-valued tag is consulted.
"""
import logging
from datetime import datetime
from typing import Optional

from .. import config
from ..models import Orientation
from .container import FieldKind, Segment, TagLookup


def decode_orientation(tags: TagLookup, source: str = '') -> Optional[Orientation]:
    raw = tags.get(config.ORIENTATION_TAG, Segment.PRIMARY)
    if raw is None:
        return None
    if raw.kind is not FieldKind.SHORT:
        _log_wrong_type(config.ORIENTATION_TAG, raw.kind, source)
        return None

    code = raw.first()
    if code is None:
        return None
    try:
        return Orientation.from_code(code)
    except ValueError:
        logging.warning(f"Invalid orientation value read: {code} in {source}")
        return None


def decode_capture_time(tags: TagLookup, source: str = '') -> Optional[datetime]:
    text = decode_text(tags, config.CAPTURE_TIME_TAG, source)
    if text is None:
        return None
    try:
        return datetime.strptime(text, config.CAPTURE_TIME_FORMAT)
    except ValueError:
        logging.warning(f"Date/time string {text!r} has wrong formatting, for file: {source}")
        return None


def decode_text(tags: TagLookup, tag: str, source: str = '') -> Optional[str]:
    """Returns the UTF-8 text of an ASCII tag."""
    raw = tags.get(tag, Segment.PRIMARY)
    if raw is None:
        return None
    if raw.kind is not FieldKind.ASCII:
        _log_wrong_type(tag, raw.kind, source)
        return None

    value = raw.first()
    if value is None:
        return None
    try:
        return value.decode('utf-8')
    except UnicodeDecodeError:
        logging.warning(f"{tag} string is not valid UTF-8, for file: {source}")
        return None


def _log_wrong_type(tag: str, kind: FieldKind, source: str):
    logging.warning(f"EXIF field {tag} had unexpected type {kind.name}, for file: {source}")
