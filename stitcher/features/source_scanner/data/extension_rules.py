from pathlib import Path
from typing import Sequence

class ExtensionRules:
    """
    Central logic for which files the stitcher can work with.
    """

    # Compared case-insensitively
    RECOGNIZED_EXTENSIONS = frozenset({
        ".png", ".jpg", ".jpeg", ".jfif",
        ".tiff", ".bmp", ".webp", ".avif"
    })

    @classmethod
    def is_recognized(cls, extension: str) -> bool:
        return extension.lower() in cls.RECOGNIZED_EXTENSIONS

    @classmethod
    def all_equal(cls, files: Sequence[Path]) -> bool:
        """
        True when every file shares the extension of the first one.
        An empty sequence is a caller bug, not a valid answer.
        """
        if not files:
            raise ValueError("all_equal() needs at least one file")

        first = Path(files[0]).suffix.lower()
        return all(Path(f).suffix.lower() == first for f in files[1:])
