import logging
from pathlib import Path
from typing import List, Optional, Union

from stitcher.core.common.enums import SkipReason
from stitcher.core.common.errors import DiscoveryError

from ..domain.interfaces import IDirectoryWalker
from ..domain.models import ScanRequest, ScanSkip, ScanSummary, StitchJob
from ..data.dir_walker import LocalDirectoryWalker
from ..data.extension_rules import ExtensionRules


class SourceScanner:
    """
    Turns the subdirectories of a root into stitch jobs.
    Only one level is inspected; nested folders are ignored.
    """

    def __init__(self,
                 walker: Optional[IDirectoryWalker] = None,
                 logger: Optional[logging.Logger] = None):
        self.walker = walker or LocalDirectoryWalker()
        self.logger = logger or logging.getLogger(__name__)

    def scan(self, request: ScanRequest) -> ScanSummary:
        """
        Classifies every matching subdirectory as a job or a skip.

        Raises:
            DiscoveryError: If no subdirectory produced a job.
        """
        summary = ScanSummary()
        self.logger.info(f"Scanning subdirectories of: {request.root_path}")

        for directory in self.walker.list_subdirectories(request.root_path, request.dir_filter):
            try:
                candidates = self.walker.list_files(directory, request.file_filter)
            except OSError as e:
                self.logger.warning(f"Skipping {directory.name}: {SkipReason.UNREADABLE.value} ({e})")
                summary.skips.append(ScanSkip(directory, SkipReason.UNREADABLE))
                continue

            result = self.classify(directory, candidates)

            if isinstance(result, StitchJob):
                self.logger.debug(f"Found {len(result.files)} file(s) to stitch in {directory.name}")
                summary.jobs.append(result)
            else:
                self.logger.warning(
                    f"Skipping {directory.name}: {result.reason.value} ({result.file_count} image file(s))"
                )
                summary.skips.append(result)

        self.logger.info(
            f"Scan complete. {len(summary.jobs)} job(s), {len(summary.skips)} skipped "
            f"out of {summary.directories_seen} subdirectories"
        )

        if not summary.jobs:
            raise DiscoveryError(f"No stitchable content found under {request.root_path}")

        return summary

    def classify(self, directory: Path, candidates: List[Path]) -> Union[StitchJob, ScanSkip]:
        """
        Exactly one outcome per directory, decided on recognized image files only:
        0 -> empty, 1 -> insufficient, mixed extensions -> mismatched, else a job.
        """
        images = [f for f in candidates if ExtensionRules.is_recognized(f.suffix)]

        if not images:
            return ScanSkip(directory, SkipReason.EMPTY, 0)
        if len(images) == 1:
            return ScanSkip(directory, SkipReason.INSUFFICIENT_FILES, 1)
        if not ExtensionRules.all_equal(images):
            return ScanSkip(directory, SkipReason.MISMATCHED_EXTENSIONS, len(images))

        return StitchJob(files=tuple(images), directory=directory)
