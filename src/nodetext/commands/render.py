"""nodetext render command - Generate embedding text for nodes."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, TYPE_CHECKING, Any

import click

from nodetext.errors import NodeFormatError

if TYPE_CHECKING:
    from nodetext.cli import NodeTextContext
    from nodetext.models import EmbeddableNode

logger = logging.getLogger(__name__)

# Separator between documents in text output
DOCUMENT_RULE = "\n\n---\n\n"


def _is_record_array(document: list[Any]) -> bool:
    """Tell an array of records apart from a single positional row."""
    return not document or any(isinstance(item, (dict, list)) for item in document)


def read_nodes(stream: IO[str]) -> list[EmbeddableNode]:
    """Read nodes from a JSON array or JSON Lines stream.

    Args:
        stream: Text stream holding the records

    Returns:
        Nodes in the order they appear in the input

    Raises:
        NodeFormatError: If the input is not valid JSON or a record is malformed
    """
    from nodetext.models import EmbeddableNode

    raw = stream.read().removeprefix("\ufeff")
    records: list[Any]

    try:
        document = json.loads(raw) if raw.strip() else []
    except json.JSONDecodeError:
        document = None

    if isinstance(document, list) and _is_record_array(document):
        records = document
    elif document is not None:
        # Single record: one JSON Lines object or positional row
        records = [document]
    else:
        records = []
        for line_no, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise NodeFormatError(f"Invalid JSON on line {line_no}: {e}", line=line_no) from e

    return [EmbeddableNode.from_row(record, index=i) for i, record in enumerate(records)]


def format_documents(nodes: list[EmbeddableNode], texts: list[str], output_format: str) -> str:
    """Render generated texts for output."""
    if output_format == "text":
        return DOCUMENT_RULE.join(texts)

    entries = [
        {"id": node.id, "label": node.label, "name": node.name, "text": text}
        for node, text in zip(nodes, texts)
    ]
    if output_format == "json":
        return json.dumps(entries, indent=2)
    return "\n".join(json.dumps(entry) for entry in entries)


@click.command("render")
@click.argument("source", type=click.File("r", encoding="utf-8-sig"), default="-")
@click.option(
    "--max-snippet-length",
    "-n",
    type=int,
    default=None,
    help="Snippet character budget (default: from config)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json", "jsonl"]),
    default="text",
    help="Output format",
)
@click.option(
    "--batch-size",
    "-b",
    type=click.IntRange(min=1),
    default=None,
    help="Nodes per progress step (default: from config)",
)
@click.pass_obj
def render(
    ctx: NodeTextContext,
    source: IO[str],
    max_snippet_length: int | None,
    output_format: str,
    batch_size: int | None,
) -> None:
    """Generate embedding text for nodes read from SOURCE.

    SOURCE is a JSON array or JSON Lines file of node records with
    label, name, filePath and optional content (default: stdin).

    \b
    Examples:
        nodetext render nodes.jsonl
        nodetext render nodes.json --format jsonl
        cat nodes.jsonl | nodetext render -n 200
    """
    from nodetext.config import NodeTextConfig
    from nodetext.logging import print_error
    from nodetext.text import iter_batch_texts

    if ctx.config is None:
        ctx.config = NodeTextConfig()

    embeddings_config = ctx.config.embeddings
    if max_snippet_length is not None:
        embeddings_config = embeddings_config.model_copy(
            update={"max_snippet_length": max_snippet_length}
        )

    try:
        nodes = read_nodes(source)
    except NodeFormatError as e:
        if ctx.debug:
            raise
        where = f" (record {e.index})" if e.index is not None else ""
        print_error(f"{e.message}{where}")
        sys.exit(e.exit_code)

    if not nodes:
        logger.warning("No nodes found in input")
        return

    texts: list[str] = []
    for batch in iter_batch_texts(
        nodes,
        embeddings_config,
        batch_size=batch_size,
        on_progress=lambda done, total: logger.debug(f"Rendered {done}/{total} nodes"),
    ):
        texts.extend(batch.texts)

    logger.info(f"Generated text for {len(texts)} nodes")
    click.echo(format_documents(nodes, texts, output_format))


__all__ = ["render", "read_nodes", "format_documents"]
