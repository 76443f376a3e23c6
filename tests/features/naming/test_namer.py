import os
from pathlib import Path

import pytest

from stitcher.core.common.errors import ConfigurationError
from stitcher.features.naming.domain.models import NamingPolicy, find_invalid_chars
from stitcher.features.naming.service.namer import name_for_directory, name_for_files

FILES = [Path("/in/left.png"), Path("/in/middle.png"), Path("/in/right.png")]


def test_name_for_files_joins_stems():
    assert name_for_files(FILES, NamingPolicy()) == "left-middle-right.png"


def test_name_for_files_is_deterministic():
    policy = NamingPolicy(prefix="pano", separator="_")
    assert name_for_files(FILES, policy) == name_for_files(list(FILES), policy)


def test_separator_only_changes_joins():
    dashed = name_for_files(FILES, NamingPolicy(separator="-"))
    plus = name_for_files(FILES, NamingPolicy(separator="+"))

    assert dashed.replace("-", "+") == plus
    assert plus == "left+middle+right.png"


def test_prefix_is_joined_with_separator():
    assert name_for_files(FILES, NamingPolicy(prefix="pano")) == "pano-left-middle-right.png"
    assert name_for_files(FILES, NamingPolicy(prefix="pano", separator="_")) == "pano_left_middle_right.png"


def test_extension_comes_from_first_file():
    files = [Path("a.JPG"), Path("b.JPG")]
    assert name_for_files(files, NamingPolicy()) == "a-b.JPG"


def test_empty_file_list_is_a_bug():
    with pytest.raises(ValueError):
        name_for_files([], NamingPolicy())


def test_name_for_directory():
    assert name_for_directory(Path("/root/A"), ".png", NamingPolicy()) == "A.png"
    assert name_for_directory(Path("/root/A"), ".png", NamingPolicy(prefix="x", separator="_")) == "x_A.png"


@pytest.mark.parametrize("field", ["prefix", "separator"])
def test_path_separator_is_rejected(field):
    with pytest.raises(ConfigurationError, match=field):
        NamingPolicy(**{field: f"a{os.sep}b"})


def test_nul_is_rejected():
    with pytest.raises(ConfigurationError):
        NamingPolicy(separator="\0")


def test_find_invalid_chars():
    assert find_invalid_chars("plain-name") == ""
    assert find_invalid_chars(f"a{os.sep}b{os.sep}c") == os.sep


def test_empty_values_are_allowed():
    policy = NamingPolicy(prefix="", separator="")
    assert name_for_files(FILES, policy) == "leftmiddleright.png"
