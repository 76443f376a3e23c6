import fnmatch
from pathlib import Path
from typing import List
from ..domain.interfaces import IDirectoryWalker

class LocalDirectoryWalker(IDirectoryWalker):
    """
    Concrete implementation on top of pathlib.
    Never descends below the directory it is given.
    Dot-prefixed entries are treated as hidden and never listed.
    """

    def list_subdirectories(self, root: Path, pattern: str) -> List[Path]:
        return self._matching(root, pattern, want_dirs=True)

    def list_files(self, directory: Path, pattern: str) -> List[Path]:
        return self._matching(directory, pattern, want_dirs=False)

    @staticmethod
    def _matching(parent: Path, pattern: str, want_dirs: bool) -> List[Path]:
        matches = []
        for item in parent.iterdir():
            if item.name.startswith("."):
                continue
            if (item.is_dir() if want_dirs else item.is_file()) and fnmatch.fnmatch(item.name, pattern):
                matches.append(item)

        # iterdir() order is filesystem dependent
        return sorted(matches, key=lambda p: p.name)
