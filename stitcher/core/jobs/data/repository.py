import threading
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from stitcher.core.common.enums import JobStatus, FailureReason
from ..domain.interfaces import IJobRepository
from ..domain.models import JobSubmission, ALLOWED_TRANSITIONS
from ..models import StitchJobModel, utc_now

class SqlJobRepository(IJobRepository):
    """
    SQLAlchemy-backed ledger.
    Worker threads share one engine (possibly a single in-memory SQLite
    connection), so every session is used under the repository lock.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._lock = threading.Lock()

    def create_job(self, submission: JobSubmission) -> str:
        with self._lock, self.session_factory() as db:
            job = StitchJobModel(
                label=submission.label,
                directory=submission.directory,
                input_files=list(submission.input_files),
                direction=submission.direction,
                status=JobStatus.PENDING,
            )
            db.add(job)
            db.commit()
            db.refresh(job)
            return job.id

    def update_status(self,
                      job_id: str,
                      status: JobStatus,
                      output_path: Optional[str] = None,
                      failure_reason: Optional[FailureReason] = None,
                      error_message: Optional[str] = None) -> None:
        with self._lock, self.session_factory() as db:
            job = db.get(StitchJobModel, job_id)
            if job is None:
                raise KeyError(f"Job {job_id} not found")

            if status not in ALLOWED_TRANSITIONS[job.status]:
                raise ValueError(f"Illegal job transition {job.status.value} -> {status.value} for {job_id}")

            job.status = status
            if status == JobStatus.RUNNING:
                job.started_at = utc_now()
            elif status in (JobStatus.COMPLETED, JobStatus.FAILED):
                job.finished_at = utc_now()
                job.output_path = output_path
                job.failure_reason = failure_reason
                job.error_message = error_message

            db.commit()

    def get_job(self, job_id: str) -> Optional[StitchJobModel]:
        with self._lock, self.session_factory() as db:
            return db.get(StitchJobModel, job_id)

    def list_jobs(self, status: Optional[JobStatus] = None) -> List[StitchJobModel]:
        with self._lock, self.session_factory() as db:
            query = db.query(StitchJobModel)
            if status is not None:
                query = query.filter(StitchJobModel.status == status)
            return query.order_by(StitchJobModel.created_at).all()
