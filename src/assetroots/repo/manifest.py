"""Repository for assets.toml read/write."""

from __future__ import annotations

from pathlib import Path

import tomlkit

from assetroots.core import paths
from assetroots.core.errors import ConfigurationError
from assetroots.core.models import AssetFile, AssetTarget, BuildUnit


# ── Serialization ───────────────────────────────────────────────────


def dump(unit: BuildUnit) -> str:
    """Serialize a BuildUnit to a TOML string."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("assetroots — build unit asset declaration"))
    doc.add(tomlkit.nl())

    table = tomlkit.table()
    table.add("label", unit.label)
    if unit.asset_targets is not None:
        table.add("assets", [t.label for t in unit.asset_targets])
    if unit.assets_dir is not None:
        table.add(paths.ASSETS_DIR_ATTR, unit.assets_dir)
    if unit.tree_artifact is not None:
        table.add("tree", _file_to_table(unit.tree_artifact, include_owner=True))
    doc.add("unit", table)

    if unit.asset_targets:
        targets = tomlkit.table()
        for target in unit.asset_targets:
            if target.label in targets:
                continue
            row = tomlkit.table()
            files = tomlkit.array()
            for file in target.files:
                files.append(_file_to_table(file, include_owner=file.owner != target.label))
            files.multiline(True)
            row.add("files", files)
            targets.add(target.label, row)
        doc.add("targets", targets)

    return tomlkit.dumps(doc)


def loads(text: str) -> BuildUnit:
    """Deserialize a manifest string into a BuildUnit."""
    raw = tomlkit.loads(text)
    unit_raw = _table(raw.get("unit", {}), "[unit]")
    targets_raw = _table(raw.get("targets", {}), "[targets]")
    label = str(unit_raw.get("label", ""))

    asset_targets: list[AssetTarget] | None = None
    if paths.ASSETS_ATTR in unit_raw:
        asset_targets = []
        if not isinstance(unit_raw[paths.ASSETS_ATTR], list):
            raise ConfigurationError(
                f"'{paths.ASSETS_ATTR}' must be an array of labels",
                label=label,
                attribute=paths.ASSETS_ATTR,
            )
        for target_label in unit_raw[paths.ASSETS_ATTR]:
            target_label = str(target_label)
            if target_label not in targets_raw:
                raise ConfigurationError(
                    f"'{target_label}' is listed in '{paths.ASSETS_ATTR}' but not defined "
                    "under [targets]",
                    label=label,
                    attribute=paths.ASSETS_ATTR,
                )
            asset_targets.append(_parse_target(target_label, targets_raw[target_label]))

    assets_dir = unit_raw.get(paths.ASSETS_DIR_ATTR)
    tree_raw = unit_raw.get("tree")

    return BuildUnit(
        label=label,
        asset_targets=asset_targets,
        assets_dir=str(assets_dir) if assets_dir is not None else None,
        tree_artifact=_parse_file(tree_raw, owner=label, is_tree=True) if tree_raw else None,
    )


def load(path: Path) -> BuildUnit:
    """Read a manifest file from disk."""
    if not path.exists():
        raise FileNotFoundError(f"Manifest not found: {path}")
    return loads(path.read_text())


def save(unit: BuildUnit, path: Path) -> None:
    """Write a manifest to disk."""
    path.write_text(dump(unit))


def _parse_target(label: str, raw: dict) -> AssetTarget:
    raw = _table(raw, f"[targets.\"{label}\"]", label=label)
    files = raw.get("files", [])
    if not isinstance(files, list):
        raise ConfigurationError(f"'files' of '{label}' must be an array of tables", label=label)
    files = tuple(_parse_file(f, owner=label) for f in files)
    return AssetTarget(label=label, files=files)


def _parse_file(raw: dict, *, owner: str, is_tree: bool = False) -> AssetFile:
    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"file entry '{raw}' in '{owner}' must be a table with a 'path' key",
            label=owner,
        )
    path = str(raw.get("path", "")).strip()
    if not path:
        raise ConfigurationError(f"file entry without 'path' in '{owner}'", label=owner)
    output = raw.get("output")
    return AssetFile.create(
        path,
        root=str(raw.get("root", "")),
        output=str(output) if output is not None else None,
        owner=str(raw.get("owner", owner)),
        is_tree=is_tree or bool(raw.get("tree", False)),
    )


def _table(raw: object, where: str, *, label: str | None = None) -> dict:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{where} must be a table", label=label)
    return raw


def _file_to_table(file: AssetFile, *, include_owner: bool) -> tomlkit.items.InlineTable:
    row = tomlkit.inline_table()
    row.append("path", file.source_relative_path.as_posix())
    if file.owner_source_root != paths.EMPTY:
        row.append("root", file.owner_source_root.as_posix())
    if file.output_path != file.source_relative_path:
        row.append("output", file.output_path.as_posix())
    if include_owner and file.owner:
        row.append("owner", file.owner)
    if file.is_tree:
        row.append("tree", True)
    return row
