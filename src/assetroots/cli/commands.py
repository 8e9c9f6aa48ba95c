"""CLI commands — resolve, check."""

from __future__ import annotations

import json
from pathlib import Path

import click

from assetroots.cli import cli
from assetroots.core.env import default_manifest
from assetroots.core.models import AssetCollection


# ── resolve ─────────────────────────────────────────────────────────


@cli.command()
@click.argument("manifest", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--format", "fmt", default="text",
    type=click.Choice(["text", "json"]),
    help="Output format.",
)
def resolve(manifest: str | None, fmt: str) -> None:
    """Print the root and packaged path of every declared asset.

    MANIFEST defaults to $ASSETROOTS_MANIFEST, then ./assets.toml.
    """
    from assetroots.services import packaging

    collection = _collect(manifest)
    parsed = packaging.parse(collection)

    if fmt == "json":
        click.echo(json.dumps(parsed.to_dict(), indent=2))
        return

    if not parsed.entries:
        click.echo("No assets declared.")
        return

    for entry in parsed.entries:
        rel = entry.packaged_path.as_posix() if entry.packaged_path.parts else "."
        click.echo(f"{entry.asset.output_path}  ->  {entry.root}  ({rel})")


# ── check ───────────────────────────────────────────────────────────


@cli.command()
@click.argument("manifest", required=False, type=click.Path(dir_okay=False))
def check(manifest: str | None) -> None:
    """Validate asset placement without printing the roots."""
    collection = _collect(manifest)

    if collection.assets_dir is None:
        click.echo("✔ No assets declared")
        return
    click.echo(f"✔ {len(collection)} asset(s) beneath '{collection.assets_dir}'")


# ── helpers ─────────────────────────────────────────────────────────


def _collect(manifest: str | None) -> AssetCollection:
    from assetroots.repo import manifest as manifest_repo
    from assetroots.services import collector

    path = Path(manifest or default_manifest())
    try:
        unit = manifest_repo.load(path)
        return collector.from_build_unit(unit)
    except (ValueError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc
