# ABOUTME: Filesystem layout of an sst project
# ABOUTME: Resolves the app root, build directory, config file and cloud assembly

"""Project paths for sst apps."""

from dataclasses import dataclass
from pathlib import Path

BUILD_DIR = ".build"
CONFIG_FILE = "sst.json"
ASSEMBLY_DIR = "cdk.out"


@dataclass(frozen=True)
class AppPaths:
    """Locations the CLI reads from and writes to for one app."""

    app_path: Path
    app_build_path: Path
    config_path: Path
    assembly_path: Path

    @classmethod
    def from_cwd(cls, cwd: str | Path) -> "AppPaths":
        app_path = Path(cwd).resolve()
        build_path = app_path / BUILD_DIR
        return cls(
            app_path=app_path,
            app_build_path=build_path,
            config_path=app_path / CONFIG_FILE,
            assembly_path=build_path / ASSEMBLY_DIR,
        )

    def ensure_build_dir(self) -> Path:
        """Create the build directory if needed and return it."""
        self.app_build_path.mkdir(parents=True, exist_ok=True)
        return self.app_build_path
