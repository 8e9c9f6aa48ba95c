"""Root resolver — places each contributed file beneath the assets directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath

from assetroots.core import paths
from assetroots.core.errors import PlacementError
from assetroots.core.models import AssetCollection, AssetFile

logger = logging.getLogger(__name__)


def resolve_root(
    file: AssetFile,
    assets_dir: PurePosixPath,
    *,
    contributor: str,
    label: str | None = None,
) -> PurePosixPath:
    """Return the output-tree prefix that maps *file* into the packaged namespace.

    The prefix test is anchored at the owning package root and compares whole
    segments. The root is cut from the output path, never from the source
    path, since generated files only exist in the output tree.
    """
    try:
        package_relative = file.package_relative_path
    except ValueError:
        package_relative = None

    if package_relative is None or not paths.starts_with(package_relative, assets_dir):
        raise PlacementError(
            file.source_relative_path.as_posix(),
            contributor,
            paths.display(assets_dir),
            label=label,
        )

    relative = paths.relative_to(package_relative, assets_dir)
    output = file.output_path
    keep = paths.segment_count(output) - paths.segment_count(relative)
    if keep < 0:
        # Output path shallower than the packaged path.
        raise PlacementError(
            file.source_relative_path.as_posix(),
            contributor,
            paths.display(assets_dir),
            label=label,
        )
    return paths.sub_fragment(output, 0, keep)


def resolve_roots(
    contributions: Iterable[tuple[str, AssetFile]],
    assets_dir: PurePosixPath,
    *,
    label: str | None = None,
) -> AssetCollection:
    """Resolve every ``(contributor, file)`` pair in order; stop at the first misplaced file."""
    assets: list[AssetFile] = []
    roots: list[PurePosixPath] = []
    for contributor, file in contributions:
        root = resolve_root(file, assets_dir, contributor=contributor, label=label)
        logger.debug("Asset %s -> root %s", file.output_path, root)
        assets.append(file)
        roots.append(root)

    return AssetCollection(tuple(assets), tuple(roots), paths.display(assets_dir))


def packaged_path(file: AssetFile, root: PurePosixPath) -> PurePosixPath:
    """Path of *file* inside the packaged namespace (output path minus *root*)."""
    return paths.relative_to(file.output_path, root)
