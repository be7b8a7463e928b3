"""Settings for the tablecheck entry points.

Settings only affect the ``validate``/``ensure`` entry points (how failures
are logged). Validators themselves are pure and never read settings.

Settings can be loaded from a dictionary, from environment variables, or
from a YAML file:

    ```yaml
    # tablecheck.yaml
    log_failures: true
    failure_log_level: WARNING
    include_hints_in_log: false
    ```

    ```python
    from dataknobs_tablecheck import configure, TablecheckSettings

    configure(TablecheckSettings.from_file("tablecheck.yaml"))
    ```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TABLECHECK_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Invalid boolean for '{name}': {raw!r}",
        context={"setting": name, "value": raw},
    )


@dataclass(frozen=True)
class TablecheckSettings:
    """Configuration for failure logging in the entry points.

    Attributes:
        log_failures: Log every failed ``validate``/``ensure`` call
        failure_log_level: Logging level used for failure logs, as a name
            ("WARNING") or a standard numeric level (30); stored as the name
        include_hints_in_log: Append hints to failure log lines
    """

    log_failures: bool = False
    failure_log_level: str | int = "DEBUG"
    include_hints_in_log: bool = True

    def __post_init__(self) -> None:
        level = self.failure_log_level
        if isinstance(level, str) and level.strip().isdigit():
            level = int(level)
        if isinstance(level, int) and not isinstance(level, bool):
            # Standard levels map back to their name, others do not validate
            level = logging.getLevelName(level)
        level = str(level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(
                f"Unknown log level: {self.failure_log_level}",
                context={"setting": "failure_log_level", "value": self.failure_log_level},
            )
        object.__setattr__(self, "failure_log_level", level)

    @property
    def failure_level(self) -> int:
        """Numeric logging level for failure logs."""
        return logging.getLevelName(self.failure_log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TablecheckSettings:
        """Create settings from a dictionary, ignoring unknown keys.

        Args:
            data: Settings dictionary

        Returns:
            TablecheckSettings instance

        Raises:
            ConfigurationError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown tablecheck settings: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        for name in ("log_failures", "include_hints_in_log"):
            if name in data:
                values[name] = _parse_bool(name, data[name])
        if "failure_log_level" in data:
            values["failure_log_level"] = data["failure_log_level"]
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Dict[str, str] | None = None) -> TablecheckSettings:
        """Create settings from ``TABLECHECK_*`` environment variables."""
        environ = os.environ if environ is None else environ
        data = {
            f.name: environ[ENV_PREFIX + f.name.upper()]
            for f in fields(cls)
            if ENV_PREFIX + f.name.upper() in environ
        }
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> TablecheckSettings:
        """Load settings from a YAML file.

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Settings file not found: {path}",
                context={"path": str(path)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in settings file {path}: {e}",
                context={"path": str(path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return cls.from_dict(data)


_settings: TablecheckSettings | None = None


def get_settings() -> TablecheckSettings:
    """Return the process-wide settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = TablecheckSettings.from_env()
    return _settings


def configure(settings: TablecheckSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Forget the process-wide settings (mainly for tests)."""
    global _settings
    _settings = None
