"""Configuration loading and defaults."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from petcheckin.models import CheckInRecord


CONFIG_DIRNAME = ".petcheckin"
CONFIG_FILENAME = "config.toml"

DEFAULT_CONFIG = {
    "facility": {
        "dog_spaces": 30,
        "cat_spaces": 12,
    },
    "checkin": {
        "days_stay": 1,
        "amount_due": 0.0,
    },
}


class Config:
    def __init__(self, data: dict, config_dir: Path):
        self._data = data
        self.config_dir = config_dir

    @classmethod
    def load(cls, project_root: Path) -> "Config":
        """Facility settings for ``project_root``; keys missing from its file keep their defaults."""
        config_dir = project_root / CONFIG_DIRNAME
        overrides: dict = {}
        config_file = config_dir / CONFIG_FILENAME
        if config_file.is_file():
            overrides = tomllib.loads(config_file.read_text(encoding="utf-8"))
        return cls(_merge_sections(DEFAULT_CONFIG, overrides), config_dir)

    @classmethod
    def load_from_cwd(cls) -> "Config":
        return cls.load(_find_project_root(Path.cwd()))

    @staticmethod
    def write_default(project_root: Path) -> tuple[Path, bool]:
        """Create the config file with default settings unless one is already there.

        Returns the file path and whether it was written.
        """
        config_file = project_root / CONFIG_DIRNAME / CONFIG_FILENAME
        if config_file.exists():
            return config_file, False
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
        return config_file, True

    # --- facility ---
    @property
    def dog_spaces(self) -> int:
        return self._data["facility"]["dog_spaces"]

    @property
    def cat_spaces(self) -> int:
        return self._data["facility"]["cat_spaces"]

    # --- checkin ---
    @property
    def days_stay(self) -> int:
        return self._data["checkin"]["days_stay"]

    @property
    def amount_due(self) -> float:
        return float(self._data["checkin"]["amount_due"])

    def blank_record(
        self, days_stay: int | None = None, amount_due: float | None = None
    ) -> CheckInRecord:
        """A record with no pet details yet, sized from the facility settings."""
        return CheckInRecord(
            pet_type="",
            pet_name="",
            pet_age=0,
            dog_spaces=self.dog_spaces,
            cat_spaces=self.cat_spaces,
            days_stay=self.days_stay if days_stay is None else days_stay,
            amount_due=self.amount_due if amount_due is None else amount_due,
        )


def _merge_sections(defaults: dict, overrides: dict) -> dict:
    merged = {name: dict(values) for name, values in defaults.items()}
    for name, values in overrides.items():
        merged.setdefault(name, {}).update(values)
    return merged


def _find_project_root(start: Path) -> Path:
    """Nearest directory at or above ``start`` holding .petcheckin/, else ``start``."""
    here = start.resolve()
    for candidate in (here, *here.parents):
        if (candidate / CONFIG_DIRNAME).is_dir():
            return candidate
    return here


DEFAULT_CONFIG_TOML = """\
[facility]
dog_spaces = 30
cat_spaces = 12

[checkin]
days_stay  = 1
amount_due = 0.0
"""
