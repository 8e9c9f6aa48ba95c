import pytest
from pathlib import Path
from click.testing import CliRunner

from assetroots.core.models import AssetFile, AssetTarget

@pytest.fixture
def runner():
    """Click CLI runner fixture."""
    return CliRunner()

@pytest.fixture
def tmp_workspace(tmp_path: Path):
    """Fixture for a temporary workspace directory."""
    return tmp_path

@pytest.fixture
def write_manifest(tmp_workspace):
    """Write an assets.toml into the workspace and return its path."""
    def _write(text: str, name: str = "assets.toml") -> Path:
        path = tmp_workspace / name
        path.write_text(text)
        return path
    return _write

@pytest.fixture
def images_target():
    """Two source files and one generated file under app/assets."""
    return AssetTarget(
        label="//app:images",
        files=(
            AssetFile.create("app/assets/logo.png", root="app", owner="//app:images"),
            AssetFile.create("app/assets/icons/x.png", root="app", owner="//app:images"),
            AssetFile.create(
                "app/assets/gen/strings.json",
                root="app",
                output="bazel-out/k8-fastbuild/bin/app/assets/gen/strings.json",
                owner="//app:images",
            ),
        ),
    )
