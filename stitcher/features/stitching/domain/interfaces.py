from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from stitcher.core.common.enums import Direction

class IStitchBackend(ABC):
    """
    Contract for the image concatenation engine.
    Abstracts away the imaging library from the batch logic, which never
    looks at pixel data.
    """

    @abstractmethod
    def stitch(self, paths: Sequence[Path], direction: Direction) -> bytes:
        """
        Concatenates the images in the given order along the direction's axis.

        Args:
            paths: Input images, already in final order. Same extension for all.
            direction: HORIZONTAL appends left to right, VERTICAL top to bottom.

        Returns:
            The encoded composite, in the format of the inputs.

        Raises:
            JobExecutionError: If an input cannot be read or the result cannot be encoded.
        """
        pass

    @abstractmethod
    def write_atomically(self, path: Path, data: bytes) -> None:
        """
        Writes data to path so that path either holds all of it or is untouched.

        Raises:
            JobExecutionError: If the file cannot be written.
        """
        pass
