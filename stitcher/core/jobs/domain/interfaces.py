from abc import ABC, abstractmethod
from typing import List, Optional

from stitcher.core.common.enums import JobStatus, FailureReason
from ..models import StitchJobModel
from .models import JobSubmission

class IJobRepository(ABC):
    """
    Contract for job ledger persistence.
    """

    @abstractmethod
    def create_job(self, submission: JobSubmission) -> str:
        """
        Creates a new Job record in PENDING state.
        Returns the job id.
        """
        pass

    @abstractmethod
    def update_status(self,
                      job_id: str,
                      status: JobStatus,
                      output_path: Optional[str] = None,
                      failure_reason: Optional[FailureReason] = None,
                      error_message: Optional[str] = None) -> None:
        """
        Moves a job to a new status.

        Raises:
            KeyError: If the job does not exist.
            ValueError: If the transition is not allowed.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[StitchJobModel]:
        pass

    @abstractmethod
    def list_jobs(self, status: Optional[JobStatus] = None) -> List[StitchJobModel]:
        pass
