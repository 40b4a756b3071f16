"""CLI implementation for video-convert."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from video_convert import __version__
from video_convert.convert import convert
from video_convert.core import (
    ConversionRequest,
    ConversionResult,
    FFmpegNotFoundError,
    ProgressEvent,
    ToolPaths,
    check_ffmpeg,
    find_tools,
    format_error,
)
from video_convert.ui import (
    console,
    create_conversion_progress,
    print_error,
    print_success,
    update_conversion,
)

# Create Typer app
app = typer.Typer(
    name="video-convert",
    help="Convert a local video file to another format with FFmpeg.",
    add_completion=False,
    no_args_is_help=True,
)


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_format(output_format: str | None, output_path: Path) -> str:
    """Resolve the output format token.

    An explicit format wins; otherwise the output file's suffix is used.

    Raises:
        typer.BadParameter: If neither gives a format.
    """
    if output_format:
        return output_format.strip().lower()
    suffix = output_path.suffix.lstrip(".").lower()
    if not suffix:
        raise typer.BadParameter(
            "Cannot infer the format from the output file name; pass --format.",
            param_hint="'--format'",
        )
    return suffix


def run_conversion(request: ConversionRequest, tools: ToolPaths) -> ConversionResult:
    """Run a conversion with a live progress bar.

    Args:
        request: What to convert.
        tools: Executable locations.

    Returns:
        The conversion result.
    """
    with create_conversion_progress() as progress:
        task_id = progress.add_task(f"Converting {request.input_path.name}...", total=None)

        def callback(event: ProgressEvent) -> None:
            update_conversion(progress, task_id, event)

        return asyncio.run(convert(request, callback, tools=tools))


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print(f"video-convert version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    input_path: Annotated[
        Path,
        typer.Argument(
            metavar="INPUT",
            help="Video file to convert.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
            show_default=False,
        ),
    ],
    output_path: Annotated[
        Path,
        typer.Argument(
            metavar="OUTPUT",
            help="Destination file (overwritten if it exists).",
            dir_okay=False,
            resolve_path=True,
            show_default=False,
        ),
    ],
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output container/format, e.g. mp4, mkv, mov. Defaults to the OUTPUT suffix.",
            show_default=False,
        ),
    ] = None,
    ffmpeg: Annotated[
        str | None,
        typer.Option(
            "--ffmpeg",
            help="Path to the ffmpeg executable.",
            envvar="VIDEO_CONVERT_FFMPEG",
            show_default=False,
        ),
    ] = None,
    ffprobe: Annotated[
        str | None,
        typer.Option(
            "--ffprobe",
            help="Path to the ffprobe executable.",
            envvar="VIDEO_CONVERT_FFPROBE",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show debug logging.",
        ),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Convert INPUT to OUTPUT, re-encoding video with H.264 and copying audio."""
    configure_logging(verbose)

    tools = find_tools(ffmpeg=ffmpeg, ffprobe=ffprobe)
    if not check_ffmpeg(tools):
        print_error(format_error(FFmpegNotFoundError()))
        raise typer.Exit(code=2)

    request = ConversionRequest(
        input_path=input_path,
        output_path=output_path,
        output_format=resolve_format(output_format, output_path),
    )

    result = run_conversion(request, tools)
    if not result.success:
        print_error(f"Conversion failed: {result.message}")
        raise typer.Exit(code=1)

    print_success(f"Saved: {output_path}")
    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
