from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from stitcher.core.common.enums import Direction, JobStatus, FailureReason
from stitcher.core.common.errors import ConfigurationError
from stitcher.features.naming.domain.models import NamingPolicy
from stitcher.features.source_scanner.domain.models import ScanSkip, StitchJob


@dataclass(frozen=True)
class StitchOptions:
    """
    Everything one invocation asked for, validated before any filesystem work.
    """
    direction: Direction
    files: Tuple[Path, ...] = ()
    all_subdirectories: bool = False
    root_dir: Optional[Path] = None
    file_filter: str = "*"
    dir_filter: str = "*"
    reverse: bool = False
    naming: NamingPolicy = field(default_factory=NamingPolicy)
    max_workers: Optional[int] = None

    def __post_init__(self):
        if self.all_subdirectories and self.files:
            raise ConfigurationError("Explicit files cannot be combined with --all-subdirectories")
        if not self.all_subdirectories and not self.files:
            raise ConfigurationError("No files given; pass files to stitch or use --all-subdirectories")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"Worker count must be at least 1, got {self.max_workers}")


@dataclass(frozen=True)
class JobOutcome:
    """
    Terminal state of one job: COMPLETED with an output path, or FAILED with a reason.
    """
    job: StitchJob
    status: JobStatus
    job_id: Optional[str] = None
    output_path: Optional[Path] = None
    failure_reason: Optional[FailureReason] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == JobStatus.COMPLETED


@dataclass
class BatchResult:
    """
    Report returned after a batch completes.
    """
    outcomes: List[JobOutcome] = field(default_factory=list)
    skips: List[ScanSkip] = field(default_factory=list)
    no_op: bool = False

    @property
    def completed(self) -> List[JobOutcome]:
        return [o for o in self.outcomes if o.succeeded]

    @property
    def failed(self) -> List[JobOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def exit_code(self) -> int:
        # One failed job fails the whole invocation
        return 1 if self.failed else 0
