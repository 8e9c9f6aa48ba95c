"""Hand-off to the packaging stage: parse collections and merge them in order."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from assetroots.core import paths
from assetroots.core.errors import PackagingConflictError
from assetroots.core.models import AssetCollection, AssetFile
from assetroots.services.resolver import packaged_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackagingEntry:
    asset: AssetFile
    root: PurePosixPath
    packaged_path: PurePosixPath

    def to_dict(self) -> dict:
        return {
            "output": self.asset.output_path.as_posix(),
            "source": self.asset.source_relative_path.as_posix(),
            "owner": self.asset.owner,
            "root": self.root.as_posix(),
            "packaged": paths.display(self.packaged_path),
            "tree": self.asset.is_tree,
        }


@dataclass
class ParsedAssets:
    """Ordered packaging entries plus the directories they were declared under."""

    entries: list[PackagingEntry] = field(default_factory=list)
    assets_dirs: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "assets_dirs": list(self.assets_dirs),
            "entries": [entry.to_dict() for entry in self.entries],
        }


def parse(collection: AssetCollection) -> ParsedAssets:
    """Compute the packaged path of every asset in *collection*.

    Tree artifacts keep an empty packaged path; their contents land directly
    under the root at execution time.
    """
    entries: list[PackagingEntry] = []
    for asset, root in collection.pairs():
        rel = paths.EMPTY if asset.is_tree else packaged_path(asset, root)
        entries.append(PackagingEntry(asset=asset, root=root, packaged_path=rel))

    dirs = [collection.assets_dir] if collection.assets_dir is not None else []
    return ParsedAssets(entries=entries, assets_dirs=dirs)


def merge(primary: AssetCollection, *dependencies: AssetCollection) -> ParsedAssets:
    """Merge *primary* with its dependencies, primary first.

    Identical (asset, root) pairs collapse to one entry. Two different files
    claiming the same packaged path raise PackagingConflictError.
    """
    merged = ParsedAssets()
    seen: set[tuple[AssetFile, PurePosixPath]] = set()
    claimed: dict[PurePosixPath, PackagingEntry] = {}

    for collection in (primary, *dependencies):
        parsed = parse(collection)
        for d in parsed.assets_dirs:
            if d not in merged.assets_dirs:
                merged.assets_dirs.append(d)

        for entry in parsed.entries:
            key = (entry.asset, entry.root)
            if key in seen:
                continue
            seen.add(key)

            if not entry.asset.is_tree:
                previous = claimed.get(entry.packaged_path)
                if previous is not None:
                    raise PackagingConflictError(
                        f"'{paths.display(entry.packaged_path)}' is provided by both "
                        f"'{previous.asset.output_path}' and '{entry.asset.output_path}'"
                    )
                claimed[entry.packaged_path] = entry
            merged.entries.append(entry)

    logger.debug("Merged %d packaging entries", len(merged.entries))
    return merged
