"""Click CLI with analyze, imports, and serve subcommands."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

import click

from import_map import __version__
from import_map.analysis.resolver import is_resolved, resolve_import_path
from import_map.config import load_config
from import_map.errors import AnalysisError
from import_map.exporter import export_results
from import_map.extractor import extract_imports
from import_map.pipeline import run_analysis

_LOG_LEVELS = ["ERROR", "WARNING", "INFO", "DEBUG"]


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug output")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    envvar="LOG_LEVEL",
    default="INFO",
    show_default=True,
    help="Log level (also read from LOG_LEVEL)",
)
def cli(verbose: bool, log_level: str):
    """import-map: map imports and find circular dependencies in JS/TS/Vue projects."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(message)s")
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    logging.getLogger("import_map").setLevel(level)


@cli.command()
@click.argument("working_dir", type=click.Path(file_okay=False, path_type=Path), required=False)
@click.option("-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Config file (default: ./import-map.toml or [tool.import-map] in pyproject.toml)")
@click.option("-o", "--output", "output_dir", type=click.Path(file_okay=False, path_type=Path),
              help="Output directory")
@click.option("--include", multiple=True, help="Glob of files to include (repeatable, replaces defaults)")
@click.option("--exclude", multiple=True, help="Glob of files to exclude (repeatable, added to defaults)")
@click.option("--max-file-size", type=click.IntRange(min=0), help="Skip files larger than this many bytes")
@click.option("--type-only/--no-type-only", "detect_type_only", default=None,
              help="Distinguish type-only imports (default: on)")
@click.option("--html/--no-html", "generate_visualization", default=None,
              help="Write the HTML visualization (default: on)")
def analyze(
    working_dir: Path | None,
    config_path: Path | None,
    output_dir: Path | None,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    max_file_size: int | None,
    detect_type_only: bool | None,
    generate_visualization: bool | None,
):
    """Analyze a source tree and write the import map outputs."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e))

    overrides: dict = {}
    if working_dir is not None:
        overrides["working_dir"] = working_dir
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if include:
        overrides["include"] = list(include)
    if exclude:
        overrides["exclude"] = config.exclude + list(exclude)
    if max_file_size is not None:
        overrides["max_file_size"] = max_file_size
    if detect_type_only is not None:
        overrides["detect_type_only_imports"] = detect_type_only
    if generate_visualization is not None:
        overrides["generate_visualization"] = generate_visualization
    config = replace(config, **overrides)

    click.echo(f"Analyzing {config.working_dir}\n")
    try:
        result = run_analysis(config)
    except AnalysisError as e:
        raise click.ClickException(str(e))

    created = export_results(
        result, config.output_dir,
        generate_visualization=config.generate_visualization,
    )

    stats = result.stats
    click.echo("Summary:")
    click.echo(f"  Files: {stats.total_files}")
    click.echo(f"  Dependencies: {stats.total_dependencies}")
    if stats.circular_dependencies:
        click.echo(click.style(
            f"  Runtime circular: {stats.runtime_circular_dependencies}",
            fg="red" if stats.runtime_circular_dependencies else "green",
        ))
        click.echo(click.style(
            f"  Type-only circular: {stats.type_only_circular_dependencies}", fg="yellow",
        ))
    else:
        click.echo(click.style("  No circular dependencies found!", fg="green"))

    click.echo(f"\nCreated {len(created)} file(s):")
    for path in created:
        click.echo(f"  {path}")

    if result.errors:
        click.echo(click.style(f"\n{len(result.errors)} file(s) failed to analyze", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--no-type-only", "no_type_only", is_flag=True, help="Report every import as runtime")
def imports(file: Path, no_type_only: bool):
    """List the imports of a single file and where they resolve."""
    try:
        declared = extract_imports(file, detect_type_only=not no_type_only)
    except ValueError as e:
        raise click.ClickException(str(e))

    if not declared:
        click.echo("No imports found.")
        return

    source = os.path.abspath(file)
    for imp in declared:
        target = resolve_import_path(source, imp.path)
        kind = click.style("type", fg="yellow") if imp.type_only else click.style("runtime", fg="green")
        suffix = "" if is_resolved(target) else click.style("  (unresolved)", fg="red")
        click.echo(f"  {kind:>18}  {imp.path}  ->  {target}{suffix}")


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'import-map[web]'"
        )

    from import_map.web import create_app

    click.echo(f"Starting import-map web API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
