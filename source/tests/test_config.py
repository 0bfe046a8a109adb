# ABOUTME: Tests for sst.json loading
# ABOUTME: Covers legacy keys and the errors raised for broken config files

import json

import pytest

from serverless_stack.config import AppConfig, ConfigError
from serverless_stack.paths import AppPaths


class TestAppConfig:
    def test_load(self, tmp_path):
        path = tmp_path / "sst.json"
        path.write_text(json.dumps({"name": "notes", "stage": "prod", "region": "eu-west-1"}))

        config = AppConfig.load(path)

        assert config == AppConfig(name="notes", stage="prod", region="eu-west-1")

    def test_legacy_keys(self):
        config = AppConfig.from_dict({"name": "notes", "defaultStage": "qa", "defaultRegion": "us-west-2"})

        assert config.stage == "qa"
        assert config.region == "us-west-2"

    def test_context_and_unknown_keys(self):
        config = AppConfig.from_dict({"name": "notes", "context": {"vpc": "shared"}, "type": "resources"})

        assert config.cdk_context == {"vpc": "shared"}
        assert config.to_dict()["cdk_context"] == {"vpc": "shared"}

    def test_name_is_required(self):
        with pytest.raises(ConfigError, match="name"):
            AppConfig.from_dict({"stage": "dev"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Could not find sst.json"):
            AppConfig.load(tmp_path / "sst.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "sst.json"
        path.write_text("{not json")

        with pytest.raises(ConfigError, match="Could not parse"):
            AppConfig.load(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "sst.json"
        path.write_text("[]")

        with pytest.raises(ConfigError, match="JSON object"):
            AppConfig.load(path)


def test_app_paths(tmp_path):
    paths = AppPaths.from_cwd(tmp_path)

    assert paths.app_path == tmp_path.resolve()
    assert paths.config_path == tmp_path.resolve() / "sst.json"
    assert paths.assembly_path == tmp_path.resolve() / ".build" / "cdk.out"
    assert not paths.app_build_path.exists()

    assert paths.ensure_build_dir().is_dir()
