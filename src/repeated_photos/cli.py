from pathlib import Path
from typing import Optional

import typer

from .config import HASH_METHODS, Settings
from .errors import ConfigurationError, FilesystemError
from .logging import get_logger
from .scan import find_images
from .dedup.cluster import group_similar
from .dedup.model import find_repeated_photos
from .relocate import relocate_duplicates
from .report import write_report_json

app = typer.Typer(help="repeated-photos – find near-duplicate images in a directory tree", no_args_is_help=True)


@app.command()
def scan(
    source_dir: Path = typer.Argument(..., exists=True, file_okay=False, dir_okay=True, readable=True,
                                      help="Directory to search for images"),
    target: Path = typer.Option(Path("duplicates"), "--target", "-t", help="Directory that receives copies of matched images"),
    workers: int = typer.Option(10, "--workers", "-w", help="Maximum number of worker threads"),
    threshold: int = typer.Option(10, help="Maximum fingerprint distance for two images to count as similar"),
    canvas_size: int = typer.Option(64, help="Edge length of the normalized canvas in pixels"),
    hash_method: str = typer.Option("phash", help=f"Perceptual hash algorithm: {', '.join(HASH_METHODS)}"),
    copy: bool = typer.Option(True, "--copy/--no-copy", help="Copy matched images into the target directory"),
    move: bool = typer.Option(False, "--move", help="Move matched images instead of copying them; cannot be combined with --no-copy"),
    report: Optional[Path] = typer.Option(None, "--report", "-r", help="Write a JSON report to this path"),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar while fingerprinting"),
) -> None:
    """
    Find near-duplicate images below SOURCE_DIR.

    Every image is fingerprinted with a perceptual hash, every pair of
    fingerprints is compared, and pairs within the threshold are listed and
    optionally copied into the target directory for review.
    """
    logger = get_logger(__name__)

    settings = Settings(
        source_dir=source_dir,
        target_dir=target,
        max_workers=workers,
        threshold=threshold,
        canvas_size=canvas_size,
        hash_method=hash_method,
    )
    try:
        settings.validate()
    except ConfigurationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc

    if move and not copy:
        logger.error("--move relocates files and cannot be combined with --no-copy")
        raise typer.Exit(code=2)

    try:
        # The review directory may sit inside the source tree
        images = find_images(settings.source_dir, settings.extensions, exclude=[settings.target_dir])
    except FilesystemError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(f"Found {len(images)} images")
    if not images:
        return

    pairs = find_repeated_photos(images, settings, show_progress=progress)

    for pair in sorted(pairs, key=lambda p: (p.distance, p.path_a, p.path_b)):
        typer.echo(f"{pair.distance:3d}  {pair.path_a}  <->  {pair.path_b}")

    groups = group_similar(pairs)
    typer.echo(f"Found {len(pairs)} similar pairs in {len(groups)} groups")

    if pairs and copy:
        results = relocate_duplicates(pairs, settings.target_dir, move=move)
        failures = [result for result in results if not result.success]
        verb = "Moved" if move else "Copied"
        typer.echo(f"{verb} {len(results) - len(failures)} images to {settings.target_dir}")
        if failures:
            logger.warning(f"{len(failures)} images could not be relocated")

    if report is not None:
        report_path = write_report_json(pairs, report, settings.threshold)
        typer.echo(f"Report: {report_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
