"""CLI entry point for the gear puzzle engine."""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

app = typer.Typer(
    name="gearpuzzle",
    help="Gear puzzle engine - validate levels and simulate gear boards",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
) -> None:
    """Gear puzzle engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(level_ref: str):
    """Load a level from a file path, falling back to a built-in level id."""
    from .levels import get_level_by_id, load_level

    path = Path(level_ref)
    if path.exists():
        try:
            return load_level(path)
        except (ValidationError, ValueError, yaml.YAMLError) as e:
            typer.echo(f"Invalid level {path}: {e}", err=True)
            raise typer.Exit(1)

    level = get_level_by_id(level_ref)
    if level is None:
        typer.echo(f"Error: No level file or built-in level named {level_ref}", err=True)
        raise typer.Exit(1)
    return level


def _parse_placement(value: str) -> tuple[str, float, float]:
    """Parse ``ITEM=X,Y``."""
    try:
        item_id, coords = value.split("=", 1)
        x, y = (float(c) for c in coords.split(","))
    except ValueError:
        raise typer.BadParameter(f"Expected ITEM=X,Y, got '{value}'")
    return item_id.strip(), x, y


def _echo_level(level) -> None:
    typer.echo(f"  Id: {level.id}")
    typer.echo(f"  Name: {level.name}")
    if level.description:
        typer.echo(f"  Description: {level.description}")
    typer.echo(f"  Start gears: {', '.join(g.id for g in level.start_gears)}")
    typer.echo(f"  Goal gears: {', '.join(g.id for g in level.goal_gears)}")
    typer.echo(f"  Inventory: {', '.join(f'{i.id} ({i.size.value})' for i in level.inventory) or '-'}")


@app.command()
def validate(
    level_file: Path = typer.Argument(..., help="Path to a YAML or JSON level file"),
) -> None:
    """Validate a level file without simulating it."""
    from .levels import load_level

    if not level_file.exists():
        typer.echo(f"Error: Level file not found: {level_file}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Validating level from {level_file}...")
    try:
        level = load_level(level_file)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Level valid: {level.name}")
    _echo_level(level)


@app.command()
def simulate(
    level_ref: str = typer.Argument(..., help="Level file path or built-in level id"),
    place: Optional[List[str]] = typer.Option(
        None, "-p", "--place", help="Place an inventory gear by center, ITEM=X,Y (repeatable)"
    ),
    no_snap: bool = typer.Option(False, "--no-snap", help="Place gears exactly, without snapping"),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="YAML file with engine tolerances"
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write a JSON board report to this path"
    ),
) -> None:
    """Place inventory gears on a level and report the resulting board."""
    from .board import BoardError, PuzzleSession
    from .engine import spin_of
    from .export import write_report
    from .models import Position, load_tolerances

    level = _load(level_ref)
    tolerances = None
    if config is not None:
        try:
            tolerances = load_tolerances(config)
        except (OSError, ValidationError, yaml.YAMLError) as e:
            typer.echo(f"Invalid config {config}: {e}", err=True)
            raise typer.Exit(1)

    session = PuzzleSession(level, tolerances)
    for value in place or []:
        item_id, x, y = _parse_placement(value)
        try:
            session.place_from_inventory(item_id, Position(x, y), snap=not no_snap)
        except BoardError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    typer.echo(f"Level: {level.name}")
    for gear in session.gears:
        spin = spin_of(gear.rotation_speed)
        state = "LOCKED" if gear.locked else (spin.value if spin else "stopped")
        meshed = ", ".join(gear.meshed_with) or "-"
        typer.echo(
            f"  {gear.id:<10} {gear.role.value:<10} {gear.size.value:<10} "
            f"{gear.rotation_speed:+.3f} {state:<8} meshed: {meshed}"
        )

    won = session.tick(0)
    typer.echo("Solved!" if won else "Not solved")

    if output is not None:
        write_report(session.gears, output)
        typer.echo(f"Report written to {output}")


@app.command()
def levels() -> None:
    """List the built-in levels."""
    from .levels import builtin_levels

    typer.echo("Built-in levels:\n")
    for level in builtin_levels():
        typer.echo(f"  {level.id:<14} {level.name:<16} {level.description or ''}")


@app.command()
def daily(
    day: Optional[str] = typer.Option(None, "--date", help="Day as YYYY-MM-DD (default: today)"),
) -> None:
    """Show the level of the day."""
    from .levels import get_daily_level

    try:
        when = date.fromisoformat(day) if day else date.today()
    except ValueError:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got '{day}'")

    level = get_daily_level(when)
    typer.echo(f"Daily level for {when.isoformat()}:")
    _echo_level(level)


if __name__ == "__main__":
    app()
