"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetwise.config import AssetwiseConfig, load_config
from assetwise.constants.config import DEFAULT_TTL_HOURS
from assetwise.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path, env={})

    assert loaded.cache_dir == tmp_path.resolve() / ".cache" / "assetwise"
    assert loaded.cache_ttl_hours == DEFAULT_TTL_HOURS
    assert not loaded.has_workspace


def test_load_config_reads_yaml_values(tmp_path: Path) -> None:
    (tmp_path / "assetwise.yaml").write_text(
        "cache_dir: /var/cache/assets\n"
        "cache_ttl_hours: 6\n"
        "workspace_id: ws-1\n"
        "site_url: https://example.atlassian.net/\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path, env={})

    assert loaded == AssetwiseConfig(
        cache_dir=Path("/var/cache/assets"),
        cache_ttl_hours=6,
        workspace_id="ws-1",
        site_url="https://example.atlassian.net",
    )
    assert loaded.has_workspace


def test_environment_overrides_file(tmp_path: Path) -> None:
    (tmp_path / "assetwise.yaml").write_text("cache_ttl_hours: 6\nworkspace_id: from-file\n", encoding="utf-8")
    env = {
        "ASSETWISE_CACHE_DIR": "state",
        "ASSETWISE_CACHE_TTL_HOURS": "48",
        "ASSETWISE_WORKSPACE_ID": "from-env",
    }

    loaded = load_config(tmp_path, env=env)

    assert loaded.cache_dir == tmp_path.resolve() / "state"
    assert loaded.cache_ttl_hours == 48
    assert loaded.workspace_id == "from-env"


def test_load_config_from_explicit_path(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("cache_ttl_hours: 2\n", encoding="utf-8")

    assert load_config(tmp_path, config_path, env={}).cache_ttl_hours == 2


def test_missing_explicit_config_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "absent.yaml", env={})


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("cache_ttl_hours: 0\n", "cache_ttl_hours"),
        ("cache_ttl_hours: true\n", "cache_ttl_hours"),
        ("cache_dir: ''\n", "cache_dir"),
        ("workspace_id: 12\n", "workspace_id"),
        ("site_url: [a]\n", "site_url"),
        ("profile: strict\n", "profile"),
    ],
    ids=["zero_ttl", "bool_ttl", "empty_cache_dir", "int_workspace", "list_site_url", "unknown_key"],
)
def test_load_config_error_names_key(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "assetwise.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path, env={})


def test_invalid_ttl_env_names_variable(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="ASSETWISE_CACHE_TTL_HOURS"):
        load_config(tmp_path, env={"ASSETWISE_CACHE_TTL_HOURS": "soon"})


@pytest.mark.parametrize(
    "yaml_content",
    ["- a\n- b\n", "cache_dir: [unclosed\n"],
    ids=["non_mapping", "invalid_yaml"],
)
def test_load_config_rejects_bad_documents(tmp_path: Path, yaml_content: str) -> None:
    (tmp_path / "assetwise.yaml").write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})
