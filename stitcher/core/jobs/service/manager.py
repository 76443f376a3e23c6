import logging
from typing import Optional

from stitcher.core.common.enums import JobStatus, FailureReason
from ..domain.interfaces import IJobRepository
from ..domain.models import JobSubmission


class JobManager:
    """
    Public API for the job ledger.
    Records every state change of a stitch job: PENDING -> RUNNING -> COMPLETED | FAILED.
    """

    def __init__(self, repo: IJobRepository, logger: Optional[logging.Logger] = None):
        self.repo = repo
        self.logger = logger or logging.getLogger(__name__)

    def submit_job(self, submission: JobSubmission) -> str:
        """Create a Job Record in PENDING state."""
        job_id = self.repo.create_job(submission)
        self.logger.debug(f"Job submitted: {job_id} [{submission.label}]")
        return job_id

    def mark_running(self, job_id: str) -> None:
        self.repo.update_status(job_id, JobStatus.RUNNING)

    def mark_completed(self, job_id: str, output_path: str) -> None:
        self.repo.update_status(job_id, JobStatus.COMPLETED, output_path=output_path)

    def mark_failed(self, job_id: str, reason: FailureReason, message: str) -> None:
        self.repo.update_status(
            job_id,
            JobStatus.FAILED,
            failure_reason=reason,
            error_message=message
        )


def create_job_manager(database_url: str, logger: Optional[logging.Logger] = None) -> JobManager:
    """Builds a ledger-backed JobManager for one run."""
    from stitcher.core.database.connection import create_session_factory
    from ..data.repository import SqlJobRepository

    return JobManager(SqlJobRepository(create_session_factory(database_url)), logger=logger)
