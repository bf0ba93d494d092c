"""Embedding text generation for code graph nodes.

Each node becomes a short header describing what and where it is, followed
by a cleaned, length-capped snippet of its source:

    Function: foo
    File: foo.ts
    Directory: src/utils

    function foo() {
      return 1;
    }

Generation is pure: the same node and config always produce the same text,
and nothing here mutates its inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from nodetext.config import DEFAULT_BATCH_SIZE, DEFAULT_MAX_SNIPPET_LENGTH, EmbeddingsConfig
from nodetext.models import EmbeddableNode, NodeLabel
from nodetext.paths import extract_filename, extract_parent_dir
from nodetext.text.sanitize import cap_text, sanitize_source

logger = logging.getLogger(__name__)

# File nodes never embed more than this many snippet characters
FILE_SNIPPET_CEILING = 300


def _resolve_snippet_cap(config: EmbeddingsConfig | None) -> int:
    if config is None:
        return DEFAULT_MAX_SNIPPET_LENGTH
    return config.max_snippet_length


def _code_element_text(kind: NodeLabel, node: EmbeddableNode, snippet_cap: int) -> str:
    """Build text for Function, Class, Method and Interface nodes."""
    lines = [f"{kind.value}: {node.name}", f"File: {extract_filename(node.file_path)}"]

    parent_dir = extract_parent_dir(node.file_path)
    if parent_dir:
        lines.append(f"Directory: {parent_dir}")

    if node.content:
        lines.extend(["", cap_text(sanitize_source(node.content), snippet_cap)])

    return "\n".join(lines)


def _file_text(node: EmbeddableNode, snippet_cap: int) -> str:
    """Build text for File nodes, with a tighter snippet ceiling."""
    lines = [f"File: {node.name}", f"Path: {node.file_path}"]

    if node.content:
        ceiling = min(snippet_cap, FILE_SNIPPET_CEILING)
        lines.extend(["", cap_text(sanitize_source(node.content), ceiling)])

    return "\n".join(lines)


def _fallback_text(node: EmbeddableNode) -> str:
    """Build text for labels without a dedicated layout."""
    return f"{node.label}: {node.name}\nPath: {node.file_path}"


def generate_embedding_text(node: EmbeddableNode, config: EmbeddingsConfig | None = None) -> str:
    """Produce the embedding text for a single node.

    Args:
        node: The node to describe
        config: Embeddings configuration (defaults apply when None)

    Returns:
        Header plus optional snippet; never empty
    """
    snippet_cap = _resolve_snippet_cap(config)

    match node.kind:
        case NodeLabel.FUNCTION | NodeLabel.CLASS | NodeLabel.METHOD | NodeLabel.INTERFACE as kind:
            return _code_element_text(kind, node, snippet_cap)
        case NodeLabel.FILE:
            return _file_text(node, snippet_cap)
        case None:
            logger.debug(f"No text layout for label {node.label!r}, using generic header")
            return _fallback_text(node)


def prepare_batch_texts(
    nodes: Sequence[EmbeddableNode],
    config: EmbeddingsConfig | None = None,
) -> list[str]:
    """Produce embedding texts for a batch of nodes.

    Returns one text per node in input order: ``result[i]`` describes
    ``nodes[i]``. Nothing is filtered, deduplicated or reordered.
    """
    return [generate_embedding_text(node, config) for node in nodes]


@dataclass(frozen=True)
class TextBatch:
    """One chunk of nodes with their generated texts."""

    index: int
    nodes: Sequence[EmbeddableNode]
    texts: list[str]

    def __len__(self) -> int:
        return len(self.texts)


def iter_batch_texts(
    nodes: Sequence[EmbeddableNode],
    config: EmbeddingsConfig | None = None,
    batch_size: int | None = None,
    on_progress: Callable[[int, int], None] | None = None,
) -> Iterator[TextBatch]:
    """Generate embedding texts chunk by chunk.

    Chunks follow input order, so joining every chunk's texts gives
    exactly ``prepare_batch_texts(nodes, config)``.

    Args:
        nodes: Nodes to describe
        config: Embeddings configuration (defaults apply when None)
        batch_size: Nodes per chunk (default: from config or 16)
        on_progress: Optional callback(completed, total) after each chunk

    Yields:
        TextBatch for each consecutive chunk

    Raises:
        ValueError: If batch_size is less than 1
    """
    if batch_size is None:
        batch_size = config.batch_size if config else DEFAULT_BATCH_SIZE
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")

    total = len(nodes)
    completed = 0
    for index, start in enumerate(range(0, total, batch_size)):
        chunk = nodes[start : start + batch_size]
        batch = TextBatch(index=index, nodes=chunk, texts=prepare_batch_texts(chunk, config))
        completed += len(chunk)
        logger.debug(f"Prepared batch {index + 1} ({completed}/{total} nodes)")
        if on_progress:
            on_progress(completed, total)
        yield batch


__all__ = [
    "FILE_SNIPPET_CEILING",
    "TextBatch",
    "generate_embedding_text",
    "prepare_batch_texts",
    "iter_batch_texts",
]
