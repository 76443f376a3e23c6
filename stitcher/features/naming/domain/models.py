import os
from dataclasses import dataclass

from stitcher.core.common.errors import ConfigurationError

# Characters that can never appear in a file name on this host.
if os.name == "nt":
    INVALID_FILENAME_CHARS = frozenset('<>:"/\\|?*' + "".join(chr(i) for i in range(32)))
else:
    INVALID_FILENAME_CHARS = frozenset("/\0")


def find_invalid_chars(value: str) -> str:
    """Returns the illegal characters of value, in order of appearance, without duplicates."""
    seen = []
    for char in value:
        if char in INVALID_FILENAME_CHARS and char not in seen:
            seen.append(char)
    return "".join(seen)


@dataclass(frozen=True)
class NamingPolicy:
    """
    Value Object controlling how output files are named.
    Validated once at startup; an illegal value is a configuration error,
    never a per-job error.
    """
    prefix: str = ""
    separator: str = "-"

    def __post_init__(self):
        for field_name in ("prefix", "separator"):
            invalid = find_invalid_chars(getattr(self, field_name))
            if invalid:
                raise ConfigurationError(
                    f"Output file {field_name} contains characters that are not allowed in file names: {invalid!r}"
                )
