"""Error types raised while collecting and placing assets."""

from __future__ import annotations

from assetroots.core import paths


class AssetError(ValueError):
    """Base class for authoring errors in a build unit's asset declaration."""

    def __init__(self, message: str, *, label: str | None = None, attribute: str | None = None):
        super().__init__(message)
        self.message = message
        self.label = label
        self.attribute = attribute

    def __str__(self) -> str:
        where = self.label or ""
        if self.attribute:
            where = f"{where} [{self.attribute}]" if where else f"[{self.attribute}]"
        return f"{where}: {self.message}" if where else self.message


class ConfigurationError(AssetError):
    """The ``assets`` and ``assets_dir`` settings disagree on presence."""

    @classmethod
    def presence_mismatch(cls, label: str | None = None) -> "ConfigurationError":
        return cls(
            f"'{paths.ASSETS_ATTR}' and '{paths.ASSETS_DIR_ATTR}' should be "
            "either both empty or both non-empty",
            label=label,
        )


class PlacementError(AssetError):
    """A contributed file is not beneath the declared assets directory."""

    def __init__(self, path: str, contributor: str, assets_dir: str, *, label: str | None = None):
        super().__init__(
            f"'{path}' (generated by '{contributor}') is not beneath '{assets_dir}'",
            label=label,
            attribute=paths.ASSETS_ATTR,
        )
        self.path = path
        self.contributor = contributor
        self.assets_dir = assets_dir


class PackagingConflictError(AssetError):
    """Two different files would land on the same packaged path."""
