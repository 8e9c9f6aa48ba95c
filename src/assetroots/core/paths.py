"""Path fragment helpers and segment-aware prefix logic.

Every path handled here is a ``PurePosixPath``: a relative, purely lexical
sequence of segments. Nothing in this module touches the filesystem.
"""

from __future__ import annotations

import posixpath
from pathlib import PurePosixPath

DEFAULT_MANIFEST = "assets.toml"
ASSETS_ATTR = "assets"
ASSETS_DIR_ATTR = "assets_dir"
TREE_ASSETS_CHILD = "assets"

EMPTY = PurePosixPath()


def fragment(value: str | PurePosixPath) -> PurePosixPath:
    """Normalise *value* into a path fragment.

    ``.`` and ``..`` segments collapse lexically; ``""`` and ``"."`` are empty.
    """
    text = value.as_posix() if isinstance(value, PurePosixPath) else str(value)
    if not text:
        return EMPTY
    normalised = posixpath.normpath(text)
    return EMPTY if normalised == "." else PurePosixPath(normalised)


def segments(path: PurePosixPath) -> tuple[str, ...]:
    return path.parts


def segment_count(path: PurePosixPath) -> int:
    return len(path.parts)


def starts_with(path: PurePosixPath, prefix: PurePosixPath) -> bool:
    """True when *prefix* is a leading run of whole segments of *path*.

    ``assetsx/a.png`` does not start with ``assets``; every path starts with
    the empty fragment.
    """
    count = segment_count(prefix)
    return segments(path)[:count] == segments(prefix)


def relative_to(path: PurePosixPath, prefix: PurePosixPath) -> PurePosixPath:
    """Strip *prefix* from *path*; an equal path yields the empty fragment."""
    if not starts_with(path, prefix):
        raise ValueError(f"'{path}' does not start with '{prefix}'")
    return sub_fragment(path, segment_count(prefix))


def sub_fragment(path: PurePosixPath, begin: int, end: int | None = None) -> PurePosixPath:
    parts = path.parts[begin:end]
    return PurePosixPath(*parts) if parts else EMPTY


def child(path: PurePosixPath, name: str) -> PurePosixPath:
    if not name or "/" in name:
        raise ValueError(f"Invalid path segment: {name!r}")
    return path / name


def display(path: PurePosixPath) -> str:
    """String form used in messages; the empty fragment renders as ``""``."""
    return "" if path == EMPTY else path.as_posix()
