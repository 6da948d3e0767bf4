import logging

import pytest
from PIL import Image

from pixelcat.app import cli
from pixelcat.app.cli import main
from pixelcat.rendering import foreground_style
from tests.test_utils import make_container, make_header


def write_fixtures(directory) -> None:
    (directory / "a_empty.pxart").write_bytes(make_header(2, 2) + b"\x00" * 16)
    (directory / "b_valid.pxart").write_bytes(make_container(1, 1, [bytes([11, 22, 33, 255])]))


def test_batch_continues_after_skipped_file(tmp_path, capsys, caplog) -> None:
    write_fixtures(tmp_path)
    with caplog.at_level(logging.WARNING):
        code = main([str(tmp_path)])
    out = capsys.readouterr().out
    assert code == 1
    assert foreground_style(11, 22, 33) + "▄" in out
    assert "a_empty.pxart" in caplog.text


def test_single_file_renders(tmp_path, capsys) -> None:
    write_fixtures(tmp_path)
    code = main([str(tmp_path / "b_valid.pxart")])
    out = capsys.readouterr().out
    assert code == 0
    assert out.endswith("\x1b[0m\x1b[K\n\n")


def test_info_mode(tmp_path, capsys) -> None:
    write_fixtures(tmp_path)
    code = main([str(tmp_path / "b_valid.pxart"), "--info"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "b_valid.pxart: 1x1, 1 layer, single"


def test_png_export(tmp_path, capsys) -> None:
    write_fixtures(tmp_path)
    out_dir = tmp_path / "png"
    code = main([str(tmp_path / "b_valid.pxart"), "--png", str(out_dir), "--info"])
    assert code == 0
    with Image.open(out_dir / "b_valid.png") as img:
        assert img.getpixel((0, 0)) == (11, 22, 33, 255)


def test_missing_path(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing")]) == 2
    assert "File not found" in capsys.readouterr().err


def test_empty_directory(tmp_path, capsys) -> None:
    assert main([str(tmp_path)]) == 1
    assert "No .pxart files" in capsys.readouterr().err


def test_glyph_and_no_trailing_blank(tmp_path, capsys) -> None:
    write_fixtures(tmp_path)
    code = main([str(tmp_path / "b_valid.pxart"), "--glyph", "#", "--no-trailing-blank"])
    out = capsys.readouterr().out
    assert code == 0
    assert out == foreground_style(11, 22, 33) + "#\x1b[0m\x1b[K\n"


def test_batch_continues_after_unexpected_error(tmp_path, capsys, caplog, monkeypatch: pytest.MonkeyPatch) -> None:
    write_fixtures(tmp_path)
    (tmp_path / "a_empty.pxart").write_bytes(b"")
    real_decode_file = cli.decode_file

    def failing_decode_file(path, fmt):
        if path.endswith("a_empty.pxart"):
            raise RuntimeError("disk on fire")
        return real_decode_file(path, fmt)

    monkeypatch.setattr(cli, "decode_file", failing_decode_file)
    with caplog.at_level(logging.ERROR):
        code = main([str(tmp_path)])
    out = capsys.readouterr().out
    assert code == 1
    assert foreground_style(11, 22, 33) + "▄" in out
    assert "a_empty.pxart" in caplog.text
    assert "disk on fire" in caplog.text
