# File: stitcher/core/common/errors.py


class StitcherError(Exception):
    """Base class for every error the stitcher reports to the user."""


class ConfigurationError(StitcherError):
    """
    Invalid invocation: illegal prefix/separator characters, conflicting flags.
    Raised before any filesystem work is done.
    """


class DiscoveryError(StitcherError):
    """The batch could not be built (missing root, nothing to stitch)."""


class JobValidationError(StitcherError):
    """An explicit file list cannot form a valid job."""


class JobExecutionError(StitcherError):
    """
    A single job failed while running.
    Isolated to that job; sibling jobs are unaffected.
    """


class JobCancelledError(JobExecutionError):
    """The job was stopped by the shared cancellation signal."""
