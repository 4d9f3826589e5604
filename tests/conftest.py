import pytest
from types import SimpleNamespace
from PIL import Image

from imagemeta.metadata.container import TagLookup

ORIENTATION = 0x0112
MODEL = 0x0110
EXIF_IFD = 0x8769
DATE_TIME_ORIGINAL = 0x9003
BODY_SERIAL_NUMBER = 0xA431


@pytest.fixture
def make_jpeg(tmp_path):
    """Returns a factory writing a small JPEG with the requested EXIF tags."""
    def _make(name="photo.jpg", orientation=None, model=None, capture_time=None, serial=None, directory=None):
        exif = Image.Exif()
        if orientation is not None:
            exif[ORIENTATION] = orientation
        if model is not None:
            exif[MODEL] = model

        sub_ifd = {}
        if capture_time is not None:
            sub_ifd[DATE_TIME_ORIGINAL] = capture_time
        if serial is not None:
            sub_ifd[BODY_SERIAL_NUMBER] = serial
        if sub_ifd:
            exif[EXIF_IFD] = sub_ifd

        path = (directory or tmp_path) / name
        with Image.new("RGB", (16, 16), color="red") as im:
            im.save(path, "JPEG", exif=exif)
        return path
    return _make


@pytest.fixture
def complete_jpeg(make_jpeg):
    return make_jpeg(
        "JAM19896.jpg",
        orientation=1,
        model="Canon EOS 5D Mark IV",
        capture_time="2019:07:26 13:25:33",
        serial="025021000537",
    )


@pytest.fixture
def fake_tags():
    """
    Builds a TagLookup from exifread-style keys, e.g.
    fake_tags(**{"Image Orientation": (3, [6])}) for (field type, values).
    """
    def _build(**entries):
        return TagLookup({
            key: SimpleNamespace(field_type=field_type, values=values)
            for key, (field_type, values) in entries.items()
        })
    return _build
