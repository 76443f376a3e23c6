# File: stitcher/core/common/enums.py

from enum import Enum, unique


@unique
class Direction(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Single-letter forms accepted on the command line. Kept out of the enum on purpose.
DIRECTION_ALIASES = {
    "h": Direction.HORIZONTAL,
    "horizontal": Direction.HORIZONTAL,
    "v": Direction.VERTICAL,
    "vertical": Direction.VERTICAL,
}


def parse_direction(value: str) -> Direction:
    try:
        return DIRECTION_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown direction: {value!r} (expected one of h, v)") from None


@unique
class JobStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@unique
class FailureReason(str, Enum):
    ERROR = "error"
    CANCELLED = "cancelled"


@unique
class SkipReason(str, Enum):
    EMPTY = "empty"
    INSUFFICIENT_FILES = "insufficient files"
    MISMATCHED_EXTENSIONS = "mismatched extensions"
    UNREADABLE = "unreadable"
