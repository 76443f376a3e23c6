import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

from stitcher.core.common.enums import Direction, JobStatus, FailureReason
from stitcher.core.common.errors import JobCancelledError, JobExecutionError
from stitcher.core.jobs.domain.models import JobSubmission
from stitcher.core.jobs.service.manager import JobManager
from stitcher.features.naming.domain.models import NamingPolicy
from stitcher.features.naming.service.namer import name_for_directory, name_for_files
from stitcher.features.source_scanner.domain.models import StitchJob
from stitcher.features.stitching.domain.interfaces import IStitchBackend
from stitcher.features.stitching.domain.models import OutputTarget

from ..domain.models import BatchResult, JobOutcome


def order_files(files: Sequence[Path], direction: Direction, reverse: bool) -> List[Path]:
    """
    Horizontal stitches right to left by default, vertical top to bottom.
    reverse flips either default, so horizontal + reverse is natural order.
    """
    flip = (direction == Direction.HORIZONTAL) != reverse
    return list(reversed(files)) if flip else list(files)


def resolve_target(job: StitchJob, policy: NamingPolicy, output_dir: Optional[Path] = None) -> OutputTarget:
    """
    Output goes to output_dir when given, otherwise next to the first input.
    Directory jobs are named after their directory, file jobs after their inputs.
    """
    directory = output_dir if output_dir is not None else job.files[0].parent

    if job.directory is not None:
        file_name = name_for_directory(job.directory, job.extension, policy)
    else:
        file_name = name_for_files(job.files, policy)

    return OutputTarget(directory=directory, file_name=file_name)


class BatchOrchestrator:
    """
    Runs every job of a batch concurrently.
    A job never shares mutable state with its siblings; the only shared object
    is the read-only cancellation event. Failures are collected, never raised.
    """

    def __init__(self,
                 backend: IStitchBackend,
                 job_manager: JobManager,
                 max_workers: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        self.backend = backend
        self.jobs = job_manager
        self.max_workers = max_workers
        self.logger = logger or logging.getLogger(__name__)

    def run_batch(self,
                  jobs: Sequence[StitchJob],
                  direction: Direction,
                  reverse: bool,
                  policy: NamingPolicy,
                  cancel_event: Optional[threading.Event] = None,
                  output_dir: Optional[Path] = None) -> BatchResult:
        cancel_event = cancel_event or threading.Event()

        # 1. Resolve targets and record every job as PENDING before dispatch
        planned = []
        for job in jobs:
            target = resolve_target(job, policy, output_dir)
            job_id = self._record(job, self.jobs.submit_job, JobSubmission(
                label=job.label,
                direction=direction,
                input_files=[str(f) for f in job.files],
                directory=str(job.directory) if job.directory is not None else None
            ))
            planned.append((job_id, job, target))

        self.logger.info(f"Stitching {len(planned)} job(s)...")

        # 2. Dispatch one task per job and join on all of them
        outcomes = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._run_job, job_id, job, target, direction, reverse, cancel_event)
                for job_id, job, target in planned
            ]
            try:
                for future in as_completed(futures):
                    outcomes[future] = future.result()
            except KeyboardInterrupt:
                self.logger.warning("Interrupted. Cancelling jobs that have not finished...")
                cancel_event.set()
                for future in futures:
                    if future not in outcomes:
                        outcomes[future] = future.result()

        # Report in submission order, not completion order
        return BatchResult(outcomes=[outcomes[f] for f in futures])

    def _run_job(self,
                 job_id: Optional[str],
                 job: StitchJob,
                 target: OutputTarget,
                 direction: Direction,
                 reverse: bool,
                 cancel_event: threading.Event) -> JobOutcome:
        if cancel_event.is_set():
            return self._failed(job_id, job, FailureReason.CANCELLED, "cancelled before start")

        self._record(job, self.jobs.mark_running, job_id)
        try:
            self.logger.info(f"Stitching {job.label} ({len(job.files)} files)")

            data = self.backend.stitch(order_files(job.files, direction, reverse), direction)

            # An in-flight backend call is never interrupted; check again before writing
            if cancel_event.is_set():
                raise JobCancelledError("cancelled before the output was written")

            target.ensure_dir()
            self.backend.write_atomically(target.path, data)

        except JobCancelledError as e:
            return self._failed(job_id, job, FailureReason.CANCELLED, str(e))

        except JobExecutionError as e:
            self.logger.error(f"Job {job.label} failed: {e}")
            return self._failed(job_id, job, FailureReason.ERROR, str(e))

        except Exception as e:
            self.logger.exception(f"Job {job.label} failed unexpectedly: {e}")
            return self._failed(job_id, job, FailureReason.ERROR, f"{type(e).__name__}: {e}")

        self._record(job, self.jobs.mark_completed, job_id, str(target.path))
        self.logger.info(f"Stitched file {target.path}")
        return JobOutcome(job=job, status=JobStatus.COMPLETED, job_id=job_id, output_path=target.path)

    def _failed(self, job_id: Optional[str], job: StitchJob, reason: FailureReason, message: str) -> JobOutcome:
        if reason == FailureReason.CANCELLED:
            self.logger.warning(f"Job {job.label} cancelled: {message}")
        self._record(job, self.jobs.mark_failed, job_id, reason, message)
        return JobOutcome(
            job=job,
            status=JobStatus.FAILED,
            job_id=job_id,
            failure_reason=reason,
            error=message
        )

    def _record(self, job: StitchJob, ledger_call: Callable[..., Any], *args) -> Any:
        """
        Ledger writes are bookkeeping only. A ledger error is logged and never
        changes the outcome of the job or of its siblings.
        """
        try:
            return ledger_call(*args)
        except Exception as e:
            self.logger.warning(f"Job ledger update failed for {job.label}: {type(e).__name__}: {e}")
            return None
