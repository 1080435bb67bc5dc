from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PATH = "~/timelog.csv"
DEFAULT_BACKUP_SUFFIX = ".bak"


def resolve_path(path: str) -> str:
    """Expand `~` and make the path absolute."""
    return os.path.abspath(os.path.expanduser(path))


@dataclass
class ClockerConfig:
    input_path: str
    output_path: str
    backup_suffix: str = DEFAULT_BACKUP_SUFFIX

    @property
    def backup_path(self) -> str:
        """Backups sit next to the input file, e.g. timelog.csv.bak."""
        return self.input_path + self.backup_suffix


def load_from_env(input_file: str | None = None, output_file: str | None = None) -> ClockerConfig:
    """Build the run configuration.

    The input path comes from `input_file`, then CLOCKER_PATH, then
    ~/timelog.csv. The output path defaults to the input path.
    """
    input_path = resolve_path(input_file or os.environ.get("CLOCKER_PATH") or DEFAULT_PATH)
    output_path = resolve_path(output_file) if output_file else input_path
    suffix = os.environ.get("CLOCKER_BACKUP_SUFFIX") or DEFAULT_BACKUP_SUFFIX
    return ClockerConfig(input_path=input_path, output_path=output_path, backup_suffix=suffix)
