from pathlib import Path
from typing import Sequence

from ..domain.models import NamingPolicy


def _with_prefix(stem: str, extension: str, policy: NamingPolicy) -> str:
    if policy.prefix:
        stem = f"{policy.prefix}{policy.separator}{stem}"
    return f"{stem}{extension}"


def name_for_files(files: Sequence[Path], policy: NamingPolicy) -> str:
    """
    Joins the stems of the input files with the policy separator and appends
    the extension of the first file.

        [a.png, b.png], separator "-"  ->  "a-b.png"
        same, prefix "out"             ->  "out-a-b.png"
    """
    if not files:
        raise ValueError("Cannot name an output for an empty file list")

    stem = policy.separator.join(Path(f).stem for f in files)
    return _with_prefix(stem, Path(files[0]).suffix, policy)


def name_for_directory(directory: Path, extension: str, policy: NamingPolicy) -> str:
    """Names a subdirectory job after the directory itself: dir 'A' + '.png' -> 'A.png'."""
    return _with_prefix(Path(directory).name, extension, policy)
