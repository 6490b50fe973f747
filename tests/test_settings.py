from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from termedit.runtime.settings import (
    CONFIG_ENV,
    Settings,
    default_config_path,
    load_settings,
)


def test_defaults() -> None:
    settings = Settings()
    assert (settings.tab_width, settings.use_soft_tabs, settings.use_highlighting) == (
        4,
        False,
        True,
    )


@pytest.mark.parametrize("width", [0, -2, "4", True])
def test_invalid_tab_width_rejected(width: object) -> None:
    with pytest.raises(ValueError):
        Settings(tab_width=width)  # type: ignore[arg-type]


@pytest.mark.parametrize("field", ["use_soft_tabs", "use_highlighting"])
@pytest.mark.parametrize("value", ["false", 0, 1, None])
def test_non_boolean_flags_rejected(field: str, value: object) -> None:
    with pytest.raises(ValueError):
        Settings(**{field: value})  # type: ignore[arg-type]


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    path = tmp_path / "conf" / "config.yml"

    result = load_settings(path)

    assert result.error is None
    assert result.settings == Settings()
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == {
        "tab_width": 4,
        "use_soft_tabs": False,
        "use_highlighting": True,
    }


def test_partial_file_keeps_remaining_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("tab_width: 8\nuse_soft_tabs: true\n", encoding="utf-8")

    result = load_settings(path)

    assert result.error is None
    assert result.settings == Settings(tab_width=8, use_soft_tabs=True)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path).settings == Settings()


@pytest.mark.parametrize(
    "content",
    [
        "tab_width: [1, 2\n",
        "- just\n- a list\n",
        "tab_width: 0\n",
        "use_soft_tabs: \"false\"\n",
    ],
)
def test_bad_file_falls_back_with_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.yml"
    path.write_text(content, encoding="utf-8")

    result = load_settings(path)

    assert result.settings == Settings()
    assert result.error


def test_env_var_overrides_default_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "custom.yml"
    monkeypatch.setenv(CONFIG_ENV, str(target))

    assert default_config_path() == target
    assert load_settings().path == target
    assert target.exists()
