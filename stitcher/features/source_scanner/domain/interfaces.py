from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

class IDirectoryWalker(ABC):
    """
    Contract for listing a directory one level deep.
    Abstracts os.scandir vs pathlib.
    """

    @abstractmethod
    def list_subdirectories(self, root: Path, pattern: str) -> List[Path]:
        """
        Immediate subdirectories of root whose name matches the glob pattern.
        Order must be stable between calls.
        """
        pass

    @abstractmethod
    def list_files(self, directory: Path, pattern: str) -> List[Path]:
        """
        Regular files directly inside directory whose name matches the glob pattern.
        Order must be stable between calls.
        """
        pass
