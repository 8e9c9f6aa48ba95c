"""Collector — turns a build unit's asset settings into an AssetCollection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import PurePosixPath

from assetroots.core import paths
from assetroots.core.errors import ConfigurationError
from assetroots.core.models import AssetCollection, AssetFile, AssetTarget, BuildUnit
from assetroots.services import resolver

logger = logging.getLogger(__name__)


def validate_assets_and_assets_dir(
    asset_targets: Iterable[AssetTarget] | None,
    assets_dir: PurePosixPath | None,
    *,
    label: str | None = None,
) -> None:
    """Raise ConfigurationError unless both settings are present or both absent."""
    if (asset_targets is None) != (assets_dir is None):
        raise ConfigurationError.presence_mismatch(label)


def collect(
    asset_targets: Iterable[AssetTarget] | None,
    assets_dir: PurePosixPath | str | None,
    *,
    label: str | None = None,
) -> AssetCollection:
    """Collect and place the files of every target listed in ``assets``."""
    if assets_dir is not None:
        assets_dir = paths.fragment(assets_dir)
    validate_assets_and_assets_dir(asset_targets, assets_dir, label=label)

    if asset_targets is None:
        return empty()

    collection = resolver.resolve_roots(
        _contributions(asset_targets), assets_dir, label=label
    )
    logger.debug(
        "Collected %d asset(s) beneath '%s' for %s",
        len(collection),
        collection.assets_dir,
        label or "<unlabelled>",
    )
    return collection


def from_build_unit(unit: BuildUnit) -> AssetCollection:
    """Collect assets from a configured build unit."""
    asset_targets = unit.get_asset_targets()
    assets_dir = unit.get_assets_dir()

    if unit.tree_artifact is not None:
        if asset_targets is not None or assets_dir is not None:
            raise ConfigurationError(
                f"a tree artifact cannot be combined with '{paths.ASSETS_ATTR}' "
                f"or '{paths.ASSETS_DIR_ATTR}'",
                label=unit.label,
            )
        return for_tree_artifact(unit.tree_artifact)

    return collect(asset_targets, assets_dir, label=unit.label)


def for_tree_artifact(tree: AssetFile) -> AssetCollection:
    """Wrap a directory artifact containing an ``assets/`` directory.

    Its contents are unknown until execution, so nothing is validated: the
    directory itself is the only asset and its ``assets`` child the only root.
    """
    if not tree.is_tree:
        raise ValueError(f"Not a tree artifact: {tree.output_path}")
    return AssetCollection(
        (tree,),
        (paths.child(tree.output_path, paths.TREE_ASSETS_CHILD),),
        tree.output_path.as_posix(),
    )


def empty() -> AssetCollection:
    return AssetCollection((), (), None)


def _contributions(asset_targets: Iterable[AssetTarget]) -> Iterator[tuple[str, AssetFile]]:
    for target in asset_targets:
        for file in target.files:
            yield target.label, file
