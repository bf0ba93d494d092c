"""nodetext - Embedding text generation for code graph nodes."""

from nodetext.config import DEFAULT_MAX_SNIPPET_LENGTH, EmbeddingsConfig
from nodetext.models import EMBEDDABLE_LABELS, EmbeddableNode, NodeLabel, is_embeddable_label
from nodetext.text import generate_embedding_text, iter_batch_texts, prepare_batch_texts

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_MAX_SNIPPET_LENGTH",
    "EMBEDDABLE_LABELS",
    "EmbeddableNode",
    "EmbeddingsConfig",
    "NodeLabel",
    "generate_embedding_text",
    "is_embeddable_label",
    "iter_batch_texts",
    "prepare_batch_texts",
]
