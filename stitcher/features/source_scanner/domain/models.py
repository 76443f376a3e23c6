from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from stitcher.core.common.enums import SkipReason
from stitcher.core.common.errors import DiscoveryError

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan the immediate subdirectories of a root.
    """
    root_path: Path
    dir_filter: str = "*"
    file_filter: str = "*"

    def __post_init__(self):
        if not self.root_path.exists():
            raise DiscoveryError(f"Scan root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise DiscoveryError(f"Scan root is not a directory: {self.root_path}")

@dataclass(frozen=True)
class StitchJob:
    """
    One unit of work: an ordered list of same-format images that become one output.
    directory is None for jobs built from an explicit file list.
    """
    files: Tuple[Path, ...]
    directory: Optional[Path] = None

    def __post_init__(self):
        if len(self.files) < 2:
            raise ValueError(f"A stitch job needs at least two files, got {len(self.files)}")

    @property
    def extension(self) -> str:
        return self.files[0].suffix

    @property
    def label(self) -> str:
        """Human readable name used in logs and reports."""
        if self.directory is not None:
            return self.directory.name
        return ", ".join(f.name for f in self.files)

@dataclass(frozen=True)
class ScanSkip:
    """
    A subdirectory that matched the filter but cannot be stitched.
    """
    directory: Path
    reason: SkipReason
    file_count: int = 0

@dataclass
class ScanSummary:
    """
    Report returned after scanning completes.
    Every matching subdirectory ends up in exactly one of jobs or skips.
    """
    jobs: List[StitchJob] = field(default_factory=list)
    skips: List[ScanSkip] = field(default_factory=list)

    @property
    def directories_seen(self) -> int:
        return len(self.jobs) + len(self.skips)
