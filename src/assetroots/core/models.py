"""Data shapes for build units, asset files and resolved asset collections.

An asset is reachable through three path facets, all supplied by the build
graph and never computed here:

    source_relative_path   app/assets/img/logo.png     (relative to the source root)
    owner_source_root      app                          (package that owns the file)
    output_path            bazel-out/bin/app/assets/img/logo.png
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from assetroots.core import paths


# ── Build graph layer ───────────────────────────────────────────────


@dataclass(frozen=True)
class AssetFile:
    """A file contributed by a build unit, as seen by the build graph."""

    source_relative_path: PurePosixPath
    output_path: PurePosixPath
    owner_source_root: PurePosixPath
    owner: str = ""
    is_tree: bool = False

    @classmethod
    def create(
        cls,
        path: str,
        *,
        root: str = "",
        output: str | None = None,
        owner: str = "",
        is_tree: bool = False,
    ) -> "AssetFile":
        """Build from plain strings; *output* defaults to *path* (a source file)."""
        source = paths.fragment(path)
        return cls(
            source_relative_path=source,
            output_path=paths.fragment(output) if output is not None else source,
            owner_source_root=paths.fragment(root),
            owner=owner,
            is_tree=is_tree,
        )

    @property
    def package_relative_path(self) -> PurePosixPath:
        """Path relative to the owning package; ``ValueError`` if outside it."""
        return paths.relative_to(self.source_relative_path, self.owner_source_root)


@dataclass(frozen=True)
class AssetTarget:
    """A build unit listed in ``assets``, exposing its files to build."""

    label: str
    files: tuple[AssetFile, ...] = ()


@dataclass
class BuildUnit:
    """The asset-related settings of one configured build unit.

    ``None`` means the setting was not specified; an empty list of targets
    is a declared-but-empty ``assets`` attribute.
    """

    label: str
    asset_targets: list[AssetTarget] | None = None
    assets_dir: str | None = None
    tree_artifact: AssetFile | None = None

    def get_asset_targets(self) -> list[AssetTarget] | None:
        return self.asset_targets

    def get_assets_dir(self) -> PurePosixPath | None:
        if self.assets_dir is None:
            return None
        return paths.fragment(self.assets_dir)


# ── Result layer ────────────────────────────────────────────────────


@dataclass(frozen=True)
class AssetCollection:
    """Asset files with their index-aligned roots.

    ``assets_dir`` is informational and does not take part in equality.
    """

    assets: tuple[AssetFile, ...] = ()
    roots: tuple[PurePosixPath, ...] = ()
    assets_dir: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "roots", tuple(self.roots))
        if len(self.assets) != len(self.roots):
            raise ValueError(
                f"{len(self.assets)} asset(s) but {len(self.roots)} root(s)"
            )

    def __len__(self) -> int:
        return len(self.assets)

    @property
    def is_empty(self) -> bool:
        return not self.assets

    def pairs(self) -> Iterator[tuple[AssetFile, PurePosixPath]]:
        return zip(self.assets, self.roots)
