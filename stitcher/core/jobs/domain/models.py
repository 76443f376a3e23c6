from dataclasses import dataclass, field
from typing import List, Optional
from stitcher.core.common.enums import Direction, JobStatus

# Legal ledger transitions: Pending -> Running -> {Completed | Failed}.
# Pending may fail directly when the job is cancelled before it starts.
ALLOWED_TRANSITIONS = {
    JobStatus.PENDING: {JobStatus.RUNNING, JobStatus.FAILED},
    JobStatus.RUNNING: {JobStatus.COMPLETED, JobStatus.FAILED},
    JobStatus.COMPLETED: set(),
    JobStatus.FAILED: set(),
}

@dataclass(frozen=True)
class JobSubmission:
    """
    DTO for recording a new stitch job in the ledger.
    """
    label: str
    direction: Direction
    input_files: List[str] = field(default_factory=list)
    directory: Optional[str] = None
