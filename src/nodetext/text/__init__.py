"""Text pipeline: turns graph nodes into documents for embedding.

Example:
    >>> from nodetext.models import EmbeddableNode
    >>> from nodetext.text import generate_embedding_text
    >>>
    >>> node = EmbeddableNode(label="Function", name="foo", file_path="src/foo.ts")
    >>> print(generate_embedding_text(node))
    Function: foo
    File: foo.ts
    Directory: src
"""

from nodetext.text.generator import (
    FILE_SNIPPET_CEILING,
    TextBatch,
    generate_embedding_text,
    iter_batch_texts,
    prepare_batch_texts,
)
from nodetext.text.sanitize import ELLIPSIS, cap_text, sanitize_source

__all__ = [
    # Generation
    "generate_embedding_text",
    "prepare_batch_texts",
    "iter_batch_texts",
    "TextBatch",
    "FILE_SNIPPET_CEILING",
    # Cleanup
    "sanitize_source",
    "cap_text",
    "ELLIPSIS",
]
