import logging
import os

import pytest

from footlights import cli, raster
from footlights.config.structure import Document, loads_document
from footlights.config.style import Style, StyleCollection
from footlights.markup import find, fromstring
from footlights.version import __version__

logger = logging.getLogger(__name__)

CONFIG = """
structure:
  - {kind: background, id: bg, style: bg}
  - {kind: image, id: photo, style: photo}
styles:
  bg:
    color: red
  photo:
    image: ${image}
    round: 4
"""


@pytest.fixture(autouse=True)
def no_stdin(monkeypatch):
    monkeypatch.setattr(cli, "read_piped_image", lambda: None)


@pytest.fixture
def config(tmp_path, image_file):
    path = tmp_path / "config.yml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def test_main_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_main_dump_default(capsys) -> None:
    assert cli.main(["dump-default"]) is None
    assert loads_document(capsys.readouterr().out) == Document()


def test_main_dump_default_file(tmp_path) -> None:
    path = tmp_path / "default.yml"
    assert cli.main(["dump-default", str(path)]) is None
    assert loads_document(path.read_text(encoding="utf-8")) == Document()


def test_main_render_svg(config, tmp_path) -> None:
    output = tmp_path / "output.svg"
    assert cli.main(["render", str(config), str(output), "--image", "input.png"]) is None
    root = fromstring(output.read_text(encoding="utf-8"))
    # 120x80 image in a 100px padded background
    assert root.get("width") == "320"
    assert root.get("height") == "280"
    assert find(root, "image").get("href") == "input.png"
    assert find(root, "clipPath").get("id") == "clip-1"


def test_main_render_piped_image(config, tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(cli, "read_piped_image", lambda: str(tmp_path / "input.png"))
    output = tmp_path / "output.svg"
    assert cli.main(["-v", "render", str(config), str(output)]) is None
    root = fromstring(output.read_text(encoding="utf-8"))
    assert find(root, "image").get("href") == str(tmp_path / "input.png")


def test_main_render_without_image(config, tmp_path) -> None:
    output = tmp_path / "output.svg"
    assert cli.main(["render", str(config), str(output)]) == 1
    assert not output.exists()


def test_main_render_missing_config(tmp_path) -> None:
    output = tmp_path / "output.svg"
    assert cli.main(["render", str(tmp_path / "missing.yml"), str(output)]) == 1


def test_main_render_missing_style(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        "structure: [{kind: background, id: bg, style: nope}]\nstyles: {}\n",
        encoding="utf-8",
    )
    assert cli.main(["render", str(path), str(tmp_path / "output.svg")]) == 1


def test_main_show(config, capsys) -> None:
    assert cli.main(["show", str(config)]) is None
    assert "Document" in capsys.readouterr().out


def test_main_render_svg_into_other_directory(config, tmp_path, monkeypatch) -> None:
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.chdir(out)
    assert cli.main(["render", str(config), "output.svg", "--image", "input.png"]) is None
    root = fromstring((out / "output.svg").read_text(encoding="utf-8"))
    href = find(root, "image").get("href")
    assert href == os.path.join("..", "input.png")
    assert os.path.samefile(out / href, tmp_path / "input.png")
    assert root.get("width") == "320"


def test_main_render_png_resolves_from_output_directory(
    config, tmp_path, monkeypatch
) -> None:
    calls = []

    def svg_to_png(svg, output, base_url=None):
        calls.append((svg, output, base_url))

    monkeypatch.setattr(raster, "svg_to_png", svg_to_png)
    out = tmp_path / "out"
    out.mkdir()
    output = out / "output.png"
    assert cli.main(["render", str(config), str(output), "--image", "input.png"]) is None
    ((svg, target, base_url),) = calls
    assert target == str(output)
    assert os.path.samefile(base_url, out)
    href = find(fromstring(svg), "image").get("href")
    assert os.path.samefile(os.path.join(base_url, href), tmp_path / "input.png")


def test_relocate_images(tmp_path) -> None:
    styles = StyleCollection(
        {
            "a": Style(image="input.png"),
            "b": Style(image="data:image/png;base64,AAAA"),
            "c": Style(image=str(tmp_path / "abs.png")),
            "d": Style(color="red"),
        }
    )
    cli.relocate_images(styles, str(tmp_path), str(tmp_path / "out"))
    assert styles["a"].image == os.path.join("..", "input.png")
    assert styles["b"].image == "data:image/png;base64,AAAA"
    assert styles["c"].image == str(tmp_path / "abs.png")
    assert styles["d"].image is None


def test_main_render_invalid_number(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text(
        "structure: [{kind: background, id: bg, style: bg}]\n"
        "styles: {bg: {color: red, size: {fit_content: .inf}}}\n",
        encoding="utf-8",
    )
    assert cli.main(["render", str(path), str(tmp_path / "output.svg")]) == 1
