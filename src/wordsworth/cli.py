from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import WordsworthConfig, load_config
from .header_shift import demote_headers, promote_headers
from .models import Document, result_to_dict
from .runner import TOOLS, run_tool, tool_ids

app = typer.Typer(help="Wordsworth writing analysis CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".md", ".markdown", ".txt"}

SHIFT_DIRECTIONS = {"promote": promote_headers, "demote": demote_headers}


class DocumentSummary(TypedDict):
    doc_id: str
    results: Dict[str, Dict[str, Any]]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    tool: List[str] | None = typer.Option(
        None,
        "--tool",
        "-t",
        help="Tool id to run (repeatable). Defaults to the configured tools.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    reader_context: str | None = typer.Option(
        None, "--reader-context", help="Free-text description of the target reader."
    ),
    include_jargon: bool | None = typer.Option(
        None,
        "--include-jargon/--no-include-jargon",
        help="Flag technical jargon when the reader is not technical.",
    ),
) -> None:
    """Run the selected analyzers and emit a JSON summary."""
    try:
        cfg = load_config(config)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config {config}: {exc}") from exc
    _apply_overrides(cfg, tool, reader_context, include_jargon)
    unknown = [tool_id for tool_id in cfg.tools if tool_id not in tool_ids()]
    if unknown:
        raise typer.BadParameter(
            f"Unknown tool(s): {', '.join(unknown)}. Choose from: {', '.join(tool_ids())}."
        )

    documents = _load_documents(input_path)
    summary: List[DocumentSummary] = []
    for document in documents:
        results: Dict[str, Dict[str, Any]] = {}
        for tool_id in cfg.tools:
            result = run_tool(
                tool_id,
                document.text,
                cfg.reader_context,
                include_jargon=cfg.include_jargon,
            )
            results[tool_id] = result_to_dict(result)
        summary.append({"doc_id": document.doc_id, "results": results})

    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command("shift-headers")
def shift_headers(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    direction: str = typer.Option(
        ..., "--direction", "-d", help="Either 'promote' (## -> #) or 'demote' (# -> ##)."
    ),
    in_place: bool = typer.Option(
        False, "--in-place", help="Write the shifted document back to the input file."
    ),
) -> None:
    """Promote or demote every markdown header by one level."""
    shift = SHIFT_DIRECTIONS.get(direction.lower().strip())
    if shift is None:
        raise typer.BadParameter("Direction must be 'promote' or 'demote'.")

    outcome = shift(input_path.read_text(encoding="utf-8"))
    if not outcome.ok or outcome.content is None:
        typer.echo(outcome.error or "Header shift failed.", err=True)
        raise typer.Exit(code=1)

    if in_place:
        input_path.write_text(outcome.content, encoding="utf-8")
        typer.echo(f"Shifted {outcome.shifted} header(s) in {input_path}")
    else:
        typer.echo(outcome.content)


@app.command("tools")
def list_tools() -> None:
    """List the available analysis tools."""
    for tool in TOOLS:
        typer.echo(f"{tool.id}\t{tool.description}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WordsworthConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: WordsworthConfig,
    tools: List[str] | None,
    reader_context: str | None,
    include_jargon: bool | None,
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if tools:
        config.tools = list(tools)
    if reader_context is not None:
        config.reader_context = reader_context
    if include_jargon is not None:
        config.include_jargon = include_jargon


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


if __name__ == "__main__":
    main()
