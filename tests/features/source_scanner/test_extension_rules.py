from pathlib import Path

import pytest

from stitcher.features.source_scanner.data.extension_rules import ExtensionRules


@pytest.mark.parametrize("ext", [".png", ".jpg", ".jpeg", ".jfif", ".tiff", ".bmp", ".webp", ".avif"])
def test_recognized_extensions(ext):
    assert ExtensionRules.is_recognized(ext)
    assert ExtensionRules.is_recognized(ext.upper())


@pytest.mark.parametrize("ext", [".gif", ".txt", ".tif", "", "png"])
def test_unrecognized_extensions(ext):
    assert not ExtensionRules.is_recognized(ext)


def test_all_equal_uniform():
    files = [Path("a.png"), Path("b.png"), Path("c.PNG")]
    assert ExtensionRules.all_equal(files)


def test_single_file_is_trivially_equal():
    assert ExtensionRules.all_equal([Path("only.webp")])


@pytest.mark.parametrize("odd_index", [0, 1, 3])
def test_one_different_extension_breaks_equality(odd_index):
    files = [Path(f"{i}.png") for i in range(4)]
    files[odd_index] = files[odd_index].with_suffix(".jpg")
    assert not ExtensionRules.all_equal(files)


def test_jpg_and_jpeg_are_different():
    assert not ExtensionRules.all_equal([Path("a.jpg"), Path("b.jpeg")])


def test_empty_sequence_is_a_bug():
    with pytest.raises(ValueError):
        ExtensionRules.all_equal([])
