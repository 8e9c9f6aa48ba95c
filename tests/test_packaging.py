from pathlib import PurePosixPath

import pytest

from assetroots.core.errors import PackagingConflictError
from assetroots.core.models import AssetFile, AssetTarget
from assetroots.services import collector, packaging


def _collection(label: str, *files: AssetFile):
    return collector.collect([AssetTarget(label, files)], "assets")


def test_parse_computes_packaged_paths(images_target):
    parsed = packaging.parse(collector.collect([images_target], "assets"))

    assert [e.packaged_path for e in parsed.entries] == [
        PurePosixPath("logo.png"),
        PurePosixPath("icons/x.png"),
        PurePosixPath("gen/strings.json"),
    ]
    assert parsed.assets_dirs == ["assets"]


def test_parse_empty_collection():
    parsed = packaging.parse(collector.empty())
    assert parsed.entries == []
    assert parsed.assets_dirs == []


def test_tree_artifact_entry_has_no_packaged_path():
    tree = AssetFile.create("aar/x", output="out/aar/x", is_tree=True)
    parsed = packaging.parse(collector.for_tree_artifact(tree))
    assert parsed.to_dict()["entries"][0]["packaged"] == ""
    assert parsed.to_dict()["entries"][0]["root"] == "out/aar/x/assets"


def test_merge_keeps_primary_first_and_drops_duplicates():
    app = _collection("//app:a", AssetFile.create("app/assets/a.txt", root="app"))
    lib = _collection("//lib:b", AssetFile.create("lib/assets/b.txt", root="lib"))

    merged = packaging.merge(app, lib, lib)
    assert [e.packaged_path.as_posix() for e in merged.entries] == ["a.txt", "b.txt"]
    assert merged.assets_dirs == ["assets"]


def test_merge_rejects_two_files_on_one_path():
    app = _collection("//app:a", AssetFile.create("app/assets/a.txt", root="app"))
    lib = _collection("//lib:a", AssetFile.create("lib/assets/a.txt", root="lib"))

    with pytest.raises(PackagingConflictError) as excinfo:
        packaging.merge(app, lib)
    assert "'a.txt' is provided by both" in str(excinfo.value)
