"""CLI entry point for openapi-editor."""

import logging
from pathlib import Path

import click

from openapi_editor.config import OUTPUT_FORMATS, EditorConfig
from openapi_editor.document.loader import DocumentLoadError, dump_document, load_document
from openapi_editor.document.models import DeletionSummary
from openapi_editor.document.operations import filter_operations
from openapi_editor.editor.core import OpenApiEditor


def _load(doc_path: Path) -> tuple[dict, str]:
    try:
        return load_document(doc_path)
    except DocumentLoadError as e:
        raise click.ClickException(str(e)) from e


def _setup_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _echo_summary(summary: DeletionSummary) -> None:
    click.echo(f"Deleted {len(summary.deleted)} operations.")
    for operation_id in summary.missing:
        click.echo(f"  Not found: {operation_id}")
    for kind, names in summary.removed_components.items():
        click.echo(f"  Removed {kind}: {', '.join(names)}")
    if summary.removed_tags:
        click.echo(f"  Removed tags: {', '.join(summary.removed_tags)}")


@click.group()
def main():
    """OpenAPI Editor: remove operations and the components only they used."""
    pass


@main.command("list")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--search", default=None, help="Only show operations whose id, path, method or summary contains TEXT.")
def list_cmd(doc_path: Path, search: str | None):
    """List the operations of an OpenAPI document."""
    document, _ = _load(doc_path)
    editor = OpenApiEditor(document)
    operations = filter_operations(editor.list_operations(), search)

    for op in operations:
        line = f"{op.method:<8}{op.path}  {op.operation_id}"
        if op.summary:
            line += f"  - {op.summary}"
        click.echo(line)
    click.echo(f"{len(operations)} operations.")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("operation_ids", nargs=-1)
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file for the edited document.")
@click.option("--match", "match", default=None, help="Also delete every operation matching this search text.")
@click.option("--sweep-cycles/--keep-cycles", default=None, help="Remove unreferenced schemas that only reference each other.")
@click.option("--output-format", default=None, type=click.Choice(OUTPUT_FORMATS), help="Output format (default: same as input).")
@click.option("-v", "--verbose", count=True, help="Log removed components (-vv for debug output).")
def delete(
    doc_path: Path,
    operation_ids: tuple[str, ...],
    output: Path,
    match: str | None,
    sweep_cycles: bool | None,
    output_format: str | None,
    verbose: int,
):
    """Delete operations by operationId and clean up unused components."""
    _setup_logging(verbose)
    if not operation_ids and not match:
        raise click.UsageError("Give at least one OPERATION_ID or --match.")

    try:
        config = EditorConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    if sweep_cycles is not None:
        config.sweep_cycles = sweep_cycles
    if output_format is not None:
        config.output_format = output_format

    click.echo(f"Loading {doc_path}...")
    document, fmt = _load(doc_path)
    editor = OpenApiEditor(document, config=config)

    targets = list(operation_ids)
    if match:
        matched = filter_operations(editor.list_operations(), match)
        click.echo(f"Matched {len(matched)} operations for '{match}'.")
        for op in matched:
            if op.operation_id not in targets:
                targets.append(op.operation_id)

    summary = editor.delete_functions(targets)
    _echo_summary(summary)

    out_fmt = fmt if config.output_format == "auto" else config.output_format
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_document(editor.get_document(), out_fmt), encoding="utf-8")
    click.echo(f"Document saved to {output}")
