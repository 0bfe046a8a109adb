# ABOUTME: Configuration management for sst apps
# ABOUTME: Loads sst.json and validates the app settings it holds

"""Configuration management for sst apps."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


class ConfigError(Exception):
    """Raised when sst.json is missing or invalid."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self.message)


@dataclass
class AppConfig:
    """Settings read from the project's sst.json."""

    name: str
    stage: str | None = None  # Default stage when --stage is not given
    region: str | None = None  # Default region when --region is not given
    cdk_context: dict[str, str] = field(default_factory=dict)  # Extra --context pairs for cdk synth

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """Create config from dictionary with legacy key support."""
        data = dict(data)

        # Older apps used defaultStage/defaultRegion
        if "defaultStage" in data and "stage" not in data:
            data["stage"] = data.pop("defaultStage")
        if "defaultRegion" in data and "region" not in data:
            data["region"] = data.pop("defaultRegion")
        if "context" in data and "cdk_context" not in data:
            data["cdk_context"] = data.pop("context")

        if not data.get("name"):
            raise ConfigError("sst.json must define a 'name' for the app")

        known = {"name", "stage", "region", "cdk_context"}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def load(cls, path: Path) -> "AppConfig":
        """Load configuration from file."""
        if not path.exists():
            raise ConfigError(f"Could not find {path.name} in {path.parent}. Is this an sst app?", path)

        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Could not parse {path.name}: {e}", path) from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path.name} must contain a JSON object", path)

        return cls.from_dict(data)
