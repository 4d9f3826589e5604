import pytest

from imagemeta.models import FileAttributes, ImageAttributes, MetadataRecord, Orientation


def test_orientation_codes_are_distinct_and_cover_one_to_eight():
    codes = [o.code for o in Orientation]
    assert sorted(codes) == list(range(1, 9))


@pytest.mark.parametrize("code", range(1, 9))
def test_orientation_code_round_trips(code):
    assert Orientation.from_code(code).code == code


def test_orientation_names():
    assert Orientation.from_code(1) is Orientation.NORMAL
    assert Orientation.from_code(6) is Orientation.QUARTER_ROTATION_CCW
    assert Orientation.from_code(8) is Orientation.QUARTER_ROTATION_CW


@pytest.mark.parametrize("code", [0, 9, -1, 65535, None, "1"])
def test_orientation_rejects_out_of_domain(code):
    with pytest.raises(ValueError):
        Orientation.from_code(code)


def test_file_timestamps_do_not_affect_equality():
    from datetime import datetime, UTC
    a = FileAttributes("a.jpg", 10, created_time=datetime(2020, 1, 1, tzinfo=UTC))
    b = FileAttributes("a.jpg", 10)
    assert a == b
    assert MetadataRecord(a) == MetadataRecord(b)


def test_record_is_immutable():
    rec = MetadataRecord(FileAttributes("a.jpg", 10), ImageAttributes(camera_model="X"))
    with pytest.raises(AttributeError):
        rec.file = FileAttributes("b.jpg", 1)
    assert rec.filename == "a.jpg"
    assert rec.size == 10
