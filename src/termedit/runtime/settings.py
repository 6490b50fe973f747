"""Editor preferences and their on-disk YAML file."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from . import telemetry

CONFIG_ENV = "TERMEDIT_CONFIG"
CONFIG_DIR_NAME = ".termedit"
CONFIG_FILE_NAME = "config.yml"


@dataclass(frozen=True, slots=True)
class Settings:
    """Read-only preferences shared by every buffer of a session."""

    tab_width: int = 4
    use_soft_tabs: bool = False
    use_highlighting: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int):
            raise ValueError("tab_width must be an integer")
        if self.tab_width < 1:
            raise ValueError("tab_width must be at least 1")
        for name in ("use_soft_tabs", "use_highlighting"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        defaults = cls()
        return cls(
            tab_width=data.get("tab_width", defaults.tab_width),
            use_soft_tabs=data.get("use_soft_tabs", defaults.use_soft_tabs),
            use_highlighting=data.get("use_highlighting", defaults.use_highlighting),
        )

    def to_mapping(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SettingsLoadResult:
    settings: Settings
    path: Path
    error: Optional[str] = None


def default_config_path() -> Path:
    override = os.getenv(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_settings(path: Optional[Path] = None) -> SettingsLoadResult:
    """Load settings, writing a default file when none exists yet.

    Failures never propagate: the defaults are returned together with a
    human-readable ``error`` the host can show as a status message.
    """

    config_path = Path(path) if path is not None else default_config_path()
    defaults = Settings()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                yaml.safe_dump(defaults.to_mapping(), sort_keys=False),
                encoding="utf-8",
            )
        except OSError as exc:
            return _failed(config_path, f"could not create config ({exc})")
        telemetry.record_event("settings.created", data={"path": str(config_path)})
        return SettingsLoadResult(settings=defaults, path=config_path)

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        return _failed(config_path, f"could not read config ({exc})")
    except yaml.YAMLError as exc:
        return _failed(config_path, f"invalid YAML ({exc})")

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        return _failed(config_path, "config root must be a mapping")

    try:
        settings = Settings.from_mapping(raw)
    except ValueError as exc:
        return _failed(config_path, str(exc))

    telemetry.record_event(
        "settings.loaded",
        level="debug",
        data={"path": str(config_path), **settings.to_mapping()},
    )
    return SettingsLoadResult(settings=settings, path=config_path)


def _failed(path: Path, reason: str) -> SettingsLoadResult:
    telemetry.record_event(
        "settings.error", level="warning", data={"path": str(path), "reason": reason}
    )
    return SettingsLoadResult(settings=Settings(), path=path, error=reason)


__all__ = [
    "CONFIG_ENV",
    "Settings",
    "SettingsLoadResult",
    "default_config_path",
    "load_settings",
]
