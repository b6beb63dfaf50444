"""CLI entry point for hookflow."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from hookflow import __version__
from hookflow.config import load_config
from hookflow.errors import HookflowError
from hookflow.scanner import ScanResult, scan_file


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["md", "json"], case_sensitive=False),
    default="md",
    help="Output format (default: md).",
)
@click.option(
    "-o", "--output",
    type=click.Path(resolve_path=True),
    default=None,
    help="Output file path. Defaults to stdout.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML file overriding hook package patterns and naming conventions.",
)
@click.option(
    "--graph-only", is_flag=True, default=False,
    help="With --format json, emit only the graph layout.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
@click.version_option(version=__version__)
def main(
    path: str,
    fmt: str,
    output: str | None,
    config_path: str | None,
    graph_only: bool,
    verbose: bool,
) -> None:
    """Map the hooks, effects and element tree of a React component file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(Path(config_path) if config_path else None)
        result = scan_file(Path(path), config=config)
    except HookflowError as exc:
        raise click.ClickException(str(exc)) from exc

    if fmt == "json":
        _output_json(result, output, graph_only)
    else:
        _output_md(result, output)


def _output_md(result: ScanResult, output: str | None) -> None:
    from hookflow.render.markdown import render_markdown
    md = render_markdown(result)
    if output:
        Path(output).write_text(md)
        click.echo(f"Report written to {output}")
    else:
        click.echo(md)


def _output_json(result: ScanResult, output: str | None, graph_only: bool) -> None:
    graph = result.layout.model_dump(mode="json", by_alias=True)
    if graph_only:
        data = graph
    else:
        data = {
            "analysis": result.analysis.model_dump(mode="json"),
            "graph": graph,
        }

    text = json.dumps(data, indent=2)
    if output:
        Path(output).write_text(text)
        click.echo(f"JSON report written to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
