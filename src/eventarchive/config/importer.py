"""Locations of the spreadsheet exports consumed by the CSV importer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

DEFAULT_IDENTIFIED_DIR: Final[str] = "Eventi"
DEFAULT_UNIDENTIFIED_DIR: Final[str] = "Eventi-NO_ID"


@dataclass(frozen=True, slots=True)
class ImportConfig:
    """Directories holding the identified and the unidentified sheet exports."""

    root: Path
    identified_dir_name: str = DEFAULT_IDENTIFIED_DIR
    unidentified_dir_name: str = DEFAULT_UNIDENTIFIED_DIR

    @property
    def identified_dir(self) -> Path:
        return (self.root / self.identified_dir_name).expanduser()

    @property
    def unidentified_dir(self) -> Path:
        return (self.root / self.unidentified_dir_name).expanduser()


def get_import_config(*, root: Path | None = None) -> ImportConfig:
    env_root = optional_env_var("EVENTARCHIVE_IMPORT_ROOT")
    resolved_root = root or (Path(env_root) if env_root else Path.cwd())
    return ImportConfig(
        root=resolved_root,
        identified_dir_name=optional_env_var("EVENTARCHIVE_IDENTIFIED_DIR")
        or DEFAULT_IDENTIFIED_DIR,
        unidentified_dir_name=optional_env_var("EVENTARCHIVE_UNIDENTIFIED_DIR")
        or DEFAULT_UNIDENTIFIED_DIR,
    )
