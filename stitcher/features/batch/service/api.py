import logging
import threading
from pathlib import Path
from typing import Optional, Sequence

from stitcher.core.common.errors import JobValidationError
from stitcher.core.jobs.service.manager import JobManager
from stitcher.features.source_scanner.data.extension_rules import ExtensionRules
from stitcher.features.source_scanner.domain.models import ScanRequest, StitchJob
from stitcher.features.source_scanner.service.scanner import SourceScanner
from stitcher.features.stitching.domain.interfaces import IStitchBackend

from ..domain.models import BatchResult, StitchOptions
from .orchestrator import BatchOrchestrator


def build_explicit_job(files: Sequence[Path]) -> Optional[StitchJob]:
    """
    Validates an explicit file list and turns it into a single job.

    Returns:
        The job, or None when only one file was given (nothing to stitch).

    Raises:
        JobValidationError: Missing file, unrecognized extension or mixed extensions.
    """
    for path in files:
        if not path.is_file():
            raise JobValidationError(f"Input file not found: {path}")

    unknown = [p.name for p in files if not ExtensionRules.is_recognized(p.suffix)]
    if unknown:
        raise JobValidationError(f"Unrecognized image extension: {', '.join(unknown)}")

    if len(files) == 1:
        return None

    if not ExtensionRules.all_equal(files):
        raise JobValidationError(
            f"Mismatched extensions: {', '.join(sorted({p.suffix.lower() for p in files}))}"
        )

    return StitchJob(files=tuple(files))


class BatchService:
    """
    Facade for one invocation.
    Builds the job list (explicit files or subdirectory scan) and hands it to
    the orchestrator. Validation and discovery errors propagate; job failures
    are returned in the BatchResult.
    """

    def __init__(self,
                 backend: IStitchBackend,
                 job_manager: JobManager,
                 scanner: Optional[SourceScanner] = None,
                 logger: Optional[logging.Logger] = None):
        self.backend = backend
        self.job_manager = job_manager
        self.scanner = scanner or SourceScanner(logger=logger)
        self._component_logger = logger
        self.logger = logger or logging.getLogger(__name__)

    def run(self, options: StitchOptions, cancel_event: Optional[threading.Event] = None) -> BatchResult:
        # 1. Build the job list
        skips = []
        if options.all_subdirectories:
            root = options.root_dir if options.root_dir is not None else Path.cwd()
            summary = self.scanner.scan(ScanRequest(
                root_path=root,
                dir_filter=options.dir_filter,
                file_filter=options.file_filter
            ))
            jobs = summary.jobs
            skips = summary.skips
            output_dir = options.root_dir
        else:
            job = build_explicit_job(options.files)
            if job is None:
                self.logger.warning(f"Only one file given ({options.files[0].name}), nothing to stitch")
                return BatchResult(no_op=True)
            jobs = [job]
            output_dir = options.root_dir

        # 2. Run them
        orchestrator = BatchOrchestrator(
            backend=self.backend,
            job_manager=self.job_manager,
            max_workers=options.max_workers,
            logger=self._component_logger
        )
        result = orchestrator.run_batch(
            jobs,
            direction=options.direction,
            reverse=options.reverse,
            policy=options.naming,
            cancel_event=cancel_event,
            output_dir=output_dir
        )
        result.skips = skips

        self._log_summary(result)
        return result

    def _log_summary(self, result: BatchResult) -> None:
        self.logger.info(
            f"Batch finished: {len(result.completed)} stitched, "
            f"{len(result.failed)} failed, {len(result.skips)} skipped"
        )
        for outcome in result.failed:
            self.logger.error(f"  {outcome.job.label}: {outcome.failure_reason.value} - {outcome.error}")
