from pathlib import Path

import pytest

from gandi_hosting import (
    OTE_URL,
    PRODUCTION_URL,
    ConfigurationError,
    Hosting,
    HostingConfig,
    XmlRpcCaller,
    resolve_config,
)
from gandi_hosting.config import _deep_merge, load_config

pytestmark = [pytest.mark.unit]


class TestDeepMerge:
    def test_shallow_override(self):
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self):
        base = {"hosting": {"url": OTE_URL, "poll_interval": 5}}
        override = {"hosting": {"poll_interval": 1}}
        assert _deep_merge(base, override) == {"hosting": {"url": OTE_URL, "poll_interval": 1}}

    def test_empty_base(self):
        assert _deep_merge({}, {"a": 1}) == {"a": 1}

    def test_empty_override(self):
        assert _deep_merge({"a": 1}, {}) == {"a": 1}


class TestLoadConfig:
    def test_project_only(self, tmp_path: Path):
        (tmp_path / "gandi.toml").write_text("[hosting]\npoll_interval = 2\n")
        result = load_config(project_dir=tmp_path, global_path=tmp_path / "nonexistent.toml")
        assert result["hosting"]["poll_interval"] == 2

    def test_merge_project_overrides_global(self, tmp_path: Path):
        global_toml = tmp_path / "defaults.toml"
        global_toml.write_text('[hosting]\napi_key = "global"\npoll_interval = 10\n')
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        (project_dir / "gandi.toml").write_text("[hosting]\npoll_interval = 1\n")

        result = load_config(project_dir=project_dir, global_path=global_toml)

        assert result["hosting"] == {"api_key": "global", "poll_interval": 1}

    def test_no_files_returns_empty_section(self, tmp_path: Path):
        result = load_config(project_dir=tmp_path / "nope", global_path=tmp_path / "nope.toml")
        assert result == {"hosting": {}}

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "gandi.toml").write_text("[hosting\n")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(project_dir=tmp_path, global_path=tmp_path / "nope.toml")


class TestResolveConfig:
    def test_defaults(self, tmp_path: Path):
        config = resolve_config(
            project_dir=tmp_path, global_path=tmp_path / "nope.toml", environ={}
        )
        assert config == HostingConfig()
        assert config.url == PRODUCTION_URL

    def test_file_values(self, tmp_path: Path):
        (tmp_path / "gandi.toml").write_text(
            "[hosting]\n"
            f'url = "{OTE_URL}"\n'
            "poll_interval = 0.5\n"
            "operation_timeout = 0\n"
            'failure_statuses = ["ERROR", "CANCEL"]\n'
        )
        config = resolve_config(
            project_dir=tmp_path, global_path=tmp_path / "nope.toml", environ={}
        )
        assert config.url == OTE_URL
        assert config.poll_interval == 0.5
        assert config.operation_timeout is None
        assert config.failure_statuses == ("ERROR", "CANCEL")

    def test_environment_wins(self, tmp_path: Path):
        (tmp_path / "gandi.toml").write_text('[hosting]\napi_key = "file"\n')
        config = resolve_config(
            project_dir=tmp_path,
            global_path=tmp_path / "nope.toml",
            environ={"GANDI_API_KEY": "env", "GANDI_URL": OTE_URL},
        )
        assert config.api_key == "env"
        assert config.url == OTE_URL

    def test_unknown_setting(self, tmp_path: Path):
        (tmp_path / "gandi.toml").write_text("[hosting]\npoll = 1\n")
        with pytest.raises(ConfigurationError, match="Unknown hosting settings: poll"):
            resolve_config(project_dir=tmp_path, global_path=tmp_path / "nope.toml", environ={})


class TestFromConfig:
    def test_requires_api_key(self):
        with pytest.raises(ConfigurationError, match="GANDI_API_KEY"):
            Hosting.from_config(HostingConfig())

    def test_builds_tracker_from_config(self):
        config = HostingConfig(
            api_key="secret", url=OTE_URL, poll_interval=1, operation_timeout=None
        )
        hosting = Hosting.from_config(config)
        assert isinstance(hosting.caller, XmlRpcCaller)
        assert hosting.tracker.poll_interval == 1
        assert hosting.tracker.timeout is None
        assert hosting.disks is not None
