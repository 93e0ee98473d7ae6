"""CLI application entry point for asciigrid.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from asciigrid import __version__
from asciigrid.cli.output import (
    console,
    print_error,
    print_header,
    print_summary,
    print_written,
)
from asciigrid.config import (
    AsciiGridSettings,
    CanvasConfig,
    LoggingConfig,
    OutOfBoundsPolicy,
    RenderConfig,
)
from asciigrid.core import Renderer
from asciigrid.domain import Dot, Point, Rect, Shape
from asciigrid.exceptions import AsciiGridError, SceneLoadError
from asciigrid.io import GridWriter, SceneReader, parse_shape_specs

# Create the Typer app
app = typer.Typer(
    name="asciigrid",
    help="Draw shape outlines onto a character grid.",
    add_completion=False,
)


def demo_shapes() -> list[Shape]:
    """The built-in scene: a rectangle and a dot below-left of it."""
    return [
        Rect(Point(10, 5), Point(20, 10)),
        Dot(Point(2, 2)),
    ]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]asciigrid[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def draw(
    shape: Annotated[
        list[str] | None,
        typer.Option(
            "--shape",
            "-s",
            help="Shape spec, repeatable: dot:X,Y | vline:X1,Y1,X2,Y2 | "
            "square:X,Y,SIDE | rect:X1,Y1,X2,Y2 | rect:X,Y,WxH",
            show_default=False,
        ),
    ] = None,
    scene: Annotated[
        Path | None,
        typer.Option(
            "--scene",
            help="JSON file with a list of shape descriptions",
        ),
    ] = None,
    demo: Annotated[
        bool,
        typer.Option(
            "--demo",
            help="Add the built-in demo scene (used when no shapes are given)",
        ),
    ] = False,
    fill: Annotated[
        str,
        typer.Option(
            "--fill",
            help="Background character",
        ),
    ] = ".",
    mark: Annotated[
        str,
        typer.Option(
            "--mark",
            help="Outline character",
        ),
    ] = "#",
    out_of_bounds: Annotated[
        str,
        typer.Option(
            "--out-of-bounds",
            help="Points outside the frame: fail | ignore | clamp",
        ),
    ] = "fail",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the grid to a file instead of stdout",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print a render summary to stderr",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the grid and errors",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render shape outlines as ASCII art.

    Shapes are painted in the order given; where outlines overlap the later
    shape wins. The grid is sized to the bounding frame of all outlines.

    Example:
        asciigrid -s rect:10,5,20,10 -s dot:2,2
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        policy = OutOfBoundsPolicy(out_of_bounds.lower())
    except ValueError:
        print_error(
            f"Invalid out-of-bounds policy: {out_of_bounds}",
            details="Valid values: fail, ignore, clamp",
        )
        raise typer.Exit(code=1)

    try:
        settings = AsciiGridSettings(
            canvas=CanvasConfig(fill_char=fill, mark_char=mark),
            render=RenderConfig(out_of_bounds=policy),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        print_error("Invalid settings", details=details)
        raise typer.Exit(code=1)

    try:
        shapes = parse_shape_specs(shape or [])
        if scene is not None:
            shapes.extend(_load_scene(scene))
        if demo or not shapes:
            shapes.extend(demo_shapes())

        if verbose:
            print_header(__version__)

        renderer = Renderer(settings)
        cnv = renderer.render(shapes)
        GridWriter(output).write(cnv)

        if verbose:
            stats = renderer.stats
            print_summary(
                shapes=stats.shape_count,
                points=stats.point_count,
                rows=cnv.rows,
                cols=cnv.cols,
                painted=stats.painted_count,
                skipped=stats.skipped_count,
                total_time_s=stats.duration_seconds,
            )
        if output is not None and not quiet:
            print_written(str(output))

    except AsciiGridError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def _load_scene(path: Path) -> list[Shape]:
    """Read all shapes from a scene file.

    Args:
        path: Path to the JSON scene

    Returns:
        Shapes in file order
    """
    if not path.is_file():
        raise SceneLoadError(str(path), "not a file")
    reader = SceneReader(path)
    return reader.read()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
