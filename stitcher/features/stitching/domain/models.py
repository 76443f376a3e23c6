from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class OutputTarget:
    """
    Where a job's composite goes: a directory plus a generated file name.
    """
    directory: Path
    file_name: str

    def __post_init__(self):
        if not self.file_name.strip():
            raise ValueError("Output file name cannot be empty.")

    @property
    def path(self) -> Path:
        return self.directory / self.file_name

    def ensure_dir(self) -> None:
        """Creates the output directory. Safe when a sibling job creates it concurrently."""
        self.directory.mkdir(parents=True, exist_ok=True)
