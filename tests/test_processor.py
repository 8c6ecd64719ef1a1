"""Tests for image loading and SVG export."""

from pathlib import Path

import pytest
from PIL import Image

from models import ControlState, FigureKind, MosaicConfig
from mosaic.processor import MosaicProcessor

from tests.conftest import svg_shapes


@pytest.fixture
def processor(tmp_path) -> MosaicProcessor:
    return MosaicProcessor(MosaicConfig(export_dir=str(tmp_path / "out"), max_name_attempts=3))


@pytest.fixture
def image_path(tmp_path) -> Path:
    path = tmp_path / "portrait.png"
    Image.new("RGB", (10, 10), (0, 0, 0)).save(path)
    return path


def test_load_image(processor, image_path):
    source = processor.load_image(image_path)
    assert (source.width, source.height) == (10, 10)
    assert source.image.mode == "RGBA"


def test_load_invalid_image(processor, tmp_path):
    bogus = tmp_path / "notes.png"
    bogus.write_text("not an image")
    with pytest.raises(ValueError, match="Failed to load image"):
        processor.load_image(bogus)


def test_load_missing_image(processor, tmp_path):
    with pytest.raises(ValueError):
        processor.load_image(tmp_path / "nope.png")


def test_default_export_path(processor, tmp_path):
    assert processor.default_export_path("/photos/portrait.jpg") == tmp_path / "out" / "portrait.svg"


def test_default_export_dir_is_desktop():
    assert MosaicProcessor().default_export_path("a/b.png") == Path.home() / "Desktop" / "b.svg"


def test_build_document(processor, image_path):
    source = processor.load_image(image_path)
    state = ControlState(FigureKind.SQUARE, step=5, radius=4.0, shift=False)
    document = processor.build_document(source, state)
    assert len(document) == 4
    assert document.width == 18.0


def test_export_writes_and_numbers(processor, image_path, tmp_path):
    (tmp_path / "out").mkdir()
    source = processor.load_image(image_path)
    state = ControlState(FigureKind.TRIANGLE, step=5, radius=4.0, shift=False)

    first, error = processor.export(source, state, image_path)
    assert error is None
    assert first == tmp_path / "out" / "portrait.svg"
    assert len(svg_shapes(first.read_text(encoding="utf-8"))) == 4

    second, error = processor.export(source, state, image_path)
    assert error is None
    assert second == tmp_path / "out" / "portrait_1.svg"


def test_export_reports_failure(processor, image_path):
    source = processor.load_image(image_path)
    written, error = processor.export(source, ControlState(), image_path)
    # Export directory was never created
    assert written is None
    assert error
