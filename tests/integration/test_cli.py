import logging
from pathlib import Path
from typing import Iterator

import pytest
from PIL import Image

from ascii_raster.cli import main
from ascii_raster.logging_setup import HANDLER_NAME


@pytest.fixture(autouse=True)
def drop_cli_log_handler() -> Iterator[None]:
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)


def write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_text_file_to_png(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "art.txt", "A B")
    output = tmp_path / "out.png"

    assert main([str(source), str(output)]) == 0

    out = capsys.readouterr().out
    assert "3x1 characters -> 24x8 pixels" in out
    with Image.open(output) as image:
        assert image.size == (24, 8)
        assert image.convert("RGBA").getpixel((4, 4)) == (180, 180, 180, 255)
        assert image.convert("RGBA").getpixel((12, 4)) == (0, 0, 0, 255)


def test_html_file_with_options(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(
        tmp_path / "index.html",
        '<html><body><pre class="ascii">@&amp;\n.</pre></body></html>',
    )
    output = tmp_path / "out.png"

    code = main(
        [
            str(source),
            str(output),
            "--pixel-size",
            "4",
            "--scale",
            "2",
            "--mode",
            "monochrome",
            "--bg-color",
            "#1a1a1a",
        ]
    )

    assert code == 0
    assert "2x2 characters -> 16x16 pixels" in capsys.readouterr().out
    with Image.open(output) as image:
        rgba = image.convert("RGBA")
        assert rgba.getpixel((0, 0)) == (255, 255, 255, 255)
        assert rgba.getpixel((12, 12)) == (26, 26, 26, 255)


def test_glyph_renderer(tmp_path: Path) -> None:
    source = write(tmp_path / "art.txt", ".")
    output = tmp_path / "out.png"

    assert main([str(source), str(output), "--renderer", "glyph", "--pixel-size", "1"]) == 0

    with Image.open(output) as image:
        rgba = image.convert("RGBA")
        assert rgba.size == (5, 7)
        assert rgba.getpixel((2, 6)) == (255, 255, 255, 255)
        assert rgba.getpixel((2, 5)) == (0, 0, 0, 255)


def test_glyph_renderer_with_font_metrics(tmp_path: Path) -> None:
    source = write(tmp_path / "art.txt", "..\n..")
    output = tmp_path / "out.png"
    argv = [str(source), str(output), "--renderer", "glyph", "--pixel-size", "1"]

    assert main(argv + ["--font-size", "10", "--line-height", "20"]) == 0

    with Image.open(output) as image:
        assert image.size == (12, 27)


def test_markup_without_art_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "page.html", "<p>nothing here</p>")
    output = tmp_path / "out.png"

    assert main([str(source), str(output)]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error: No ASCII art found")
    assert not output.exists()


def test_missing_input_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "out.png")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_unwritable_output_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "art.txt", "#")
    output = tmp_path / "missing-dir" / "out.png"

    assert main([str(source), str(output)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_invalid_color_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "art.txt", "#")

    assert main([str(source), str(tmp_path / "o.png"), "--bg-color", "nope"]) == 1
    assert "Invalid color" in capsys.readouterr().err


def test_empty_input_is_not_an_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = write(tmp_path / "empty.txt", "")
    output = tmp_path / "out.png"

    assert main([str(source), str(output)]) == 0

    assert "nothing written" in capsys.readouterr().err
    assert not output.exists()


def test_unknown_mode_rejected_by_parser(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "a.txt"), str(tmp_path / "b.png"), "--mode", "sepia"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("name", ["art.txt", "page.html"])
def test_invalid_utf8_input_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], name: str
) -> None:
    source = tmp_path / name
    source.write_bytes(b"caf\xe9 @@")
    output = tmp_path / "out.png"

    assert main([str(source), str(output)]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "not valid UTF-8" in err
    assert not output.exists()


@pytest.mark.parametrize("renderer", ["intensity", "glyph"])
@pytest.mark.parametrize("scale", ["nan", "inf"])
def test_non_finite_scale_fails(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], renderer: str, scale: str
) -> None:
    source = write(tmp_path / "art.txt", "#")
    output = tmp_path / "out.png"

    code = main([str(source), str(output), "--renderer", renderer, "--scale", scale])

    assert code == 1
    assert "must be a positive finite number" in capsys.readouterr().err
    assert not output.exists()


def test_line_height_without_font_size_rejected(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = write(tmp_path / "art.txt", ".")
    argv = [str(source), str(tmp_path / "out.png"), "--renderer", "glyph", "--line-height", "20"]

    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert "--line-height requires --font-size" in capsys.readouterr().err
