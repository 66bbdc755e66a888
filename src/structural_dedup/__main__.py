"""Structural model cleanup CLI.

Usage:
    python -m structural_dedup <command> <model.json> [options]

Every command prints a JSON object to stdout with an "ok" flag.
Commands that modify the model write the result to --output, or next
to the input as <name>.clean.json.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from structural_dedup.cleanup import (
    filter_elements_by_material_type,
    remove_duplicate_elements,
    remove_duplicates,
    remove_unused_properties,
    slice_walls_by_story,
    transform_model,
)
from structural_dedup.config import DEFAULT_OUTPUT_SUFFIX
from structural_dedup.models.geometry import Point2D, Point3D
from structural_dedup.models.model import StructuralModel
from structural_dedup.models.properties import MaterialType

app = typer.Typer(
    name="structural_dedup",
    help="Structural model cleanup: duplicate removal and reference repair.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_model(path: Path) -> StructuralModel:
    """Load a model JSON file, exiting with a JSON error if it can't be read."""
    if not path.exists():
        _fail(f"Model not found: {path}")
    if not path.is_file():
        _fail(f"Not a file: {path}")
    try:
        return StructuralModel.load(path)
    except ValidationError as e:
        _fail(f"Invalid model file {path}: {e.error_count()} validation errors")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Could not read model file {path}: {e}")


def _output_path(input_path: Path, output: Optional[Path]) -> Path:
    if output is not None:
        return output
    return input_path.with_name(input_path.stem + DEFAULT_OUTPUT_SUFFIX)


def _removed(before: dict[str, int], after: dict[str, int]) -> dict[str, int]:
    """Per-category differences, only where something changed."""
    return {k: before[k] - after[k] for k in before if before[k] != after[k]}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log details to stderr"),
):
    """Structural model cleanup tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def dedup(
    model_file: Path = typer.Argument(..., help="Model JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file"),
    elements_only: bool = typer.Option(
        False, "--elements-only", help="Only collapse geometric elements, keep properties and references"
    ),
):
    """Remove duplicate entities and repair references."""
    model = _load_model(model_file)
    before = model.counts()
    if elements_only:
        remove_duplicate_elements(model)
    else:
        remove_duplicates(model)
    after = model.counts()

    out = model.save(_output_path(model_file, output), deduplicate=False)
    _output({
        "ok": True,
        "before": before,
        "after": after,
        "removed": _removed(before, after),
        "output": str(out),
    })


@app.command("slice-walls")
def slice_walls(
    model_file: Path = typer.Argument(..., help="Model JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file"),
):
    """Split multi-story walls into one wall per story."""
    model = _load_model(model_file)
    walls_before = model.counts()["walls"]
    slice_walls_by_story(model)
    walls_after = model.counts()["walls"]

    out = model.save(_output_path(model_file, output), deduplicate=False)
    _output({
        "ok": True,
        "walls_before": walls_before,
        "walls_after": walls_after,
        "output": str(out),
    })


@app.command()
def prune(
    model_file: Path = typer.Argument(..., help="Model JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file"),
    remove_material: Optional[List[MaterialType]] = typer.Option(
        None, "--remove-material", "-m", help="Drop elements made of this material type (repeatable)"
    ),
):
    """Filter by material, remove duplicates, then drop unused properties."""
    model = _load_model(model_file)
    before = model.counts()
    if remove_material:
        filter_elements_by_material_type(model, remove_material)
    remove_duplicates(model)
    remove_unused_properties(model)
    after = model.counts()

    out = model.save(_output_path(model_file, output), deduplicate=False)
    _output({
        "ok": True,
        "before": before,
        "after": after,
        "removed": _removed(before, after),
        "output": str(out),
    })


@app.command()
def transform(
    model_file: Path = typer.Argument(..., help="Model JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file"),
    rotate: float = typer.Option(0.0, "--rotate", help="Counter-clockwise rotation in degrees"),
    center_x: float = typer.Option(0.0, "--center-x", help="Rotation center X"),
    center_y: float = typer.Option(0.0, "--center-y", help="Rotation center Y"),
    dx: float = typer.Option(0.0, "--dx", help="Translation in X"),
    dy: float = typer.Option(0.0, "--dy", help="Translation in Y"),
    dz: float = typer.Option(0.0, "--dz", help="Translation in Z (shifts level elevations)"),
):
    """Rotate then translate the whole model, e.g. to align it with another source."""
    model = _load_model(model_file)
    transform_model(
        model,
        angle_degrees=rotate,
        rotation_center=Point2D(x=center_x, y=center_y),
        translation=Point3D(x=dx, y=dy, z=dz),
    )

    out = model.save(_output_path(model_file, output), deduplicate=False)
    _output({
        "ok": True,
        "rotation": rotate,
        "translation": [dx, dy, dz],
        "output": str(out),
    })


@app.command()
def summary(model_file: Path = typer.Argument(..., help="Model JSON file")):
    """Show entity counts per category."""
    model = _load_model(model_file)
    _output({
        "ok": True,
        "name": model.name,
        "counts": model.counts(),
        "levels": [
            {"id": lv.id, "name": lv.name, "elevation": lv.elevation}
            for lv in model.sorted_levels()
        ],
    })


@app.command()
def version() -> None:
    """Show version."""
    from structural_dedup import __version__

    typer.echo(f"structural-dedup v{__version__}")


if __name__ == "__main__":
    app()
