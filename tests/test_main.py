import pytest

from imagemeta import main as cli


def test_help_exits_zero_without_processing(capsys, monkeypatch):
    monkeypatch.setattr(cli.BatchRunner, "run", lambda self, paths: pytest.fail("must not run"))
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Example usage" in out


def test_no_paths_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2


def test_normal_run_exits_zero_even_with_failed_files(tmp_path, complete_jpeg):
    bad = tmp_path / "notanimage.txt"
    bad.write_text("text")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(bad), str(complete_jpeg)])

    assert exc.value.code == 0
    assert complete_jpeg.with_suffix(".json").exists()


def test_unexpected_error_exits_one(monkeypatch, tmp_path):
    def boom(self, paths):
        raise RuntimeError("disk on fire")
    monkeypatch.setattr(cli.BatchRunner, "run", boom)

    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "a.jpg")])
    assert exc.value.code == 1
