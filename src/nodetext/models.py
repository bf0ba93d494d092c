"""Data models for nodes fed into the embedding text pipeline.

Nodes are produced upstream by graph extraction. This package only reads
them: an EmbeddableNode is frozen and never mutated here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from nodetext.errors import NodeFormatError


class NodeLabel(Enum):
    """Node kinds that get a dedicated text layout."""

    FUNCTION = "Function"
    CLASS = "Class"
    METHOD = "Method"
    INTERFACE = "Interface"
    FILE = "File"

    @classmethod
    def parse(cls, label: str) -> NodeLabel | None:
        """Map a raw label to a known kind, or None for anything else."""
        try:
            return cls(label)
        except ValueError:
            return None


# Labels eligible for vector embeddings
EMBEDDABLE_LABELS: tuple[NodeLabel, ...] = (
    NodeLabel.CLASS,
    NodeLabel.FUNCTION,
    NodeLabel.INTERFACE,
    NodeLabel.METHOD,
    NodeLabel.FILE,
)


def is_embeddable_label(label: str) -> bool:
    """Check whether a raw label is one of the embeddable kinds."""
    return NodeLabel.parse(label) in EMBEDDABLE_LABELS


# Accepted spellings for each field in mapping rows
_ROW_KEYS: dict[str, tuple[str, ...]] = {
    "id": ("id",),
    "name": ("name",),
    "label": ("label",),
    "file_path": ("file_path", "filePath"),
    "content": ("content",),
    "start_line": ("start_line", "startLine"),
    "end_line": ("end_line", "endLine"),
}

# Positional row layout: (id, name, label, file_path, content, start_line, end_line)
_ROW_ORDER = ("id", "name", "label", "file_path", "content", "start_line", "end_line")

_REQUIRED = ("name", "label", "file_path")


@dataclass(frozen=True)
class EmbeddableNode:
    """A code graph element to describe as text.

    ``label`` is kept as the raw string so that kinds outside NodeLabel
    still flow through the pipeline (they get the generic layout).
    """

    label: str
    name: str
    file_path: str
    content: str | None = None
    id: str = ""
    start_line: int | None = None
    end_line: int | None = None

    @property
    def kind(self) -> NodeLabel | None:
        """Known kind for this node, None when the label is unrecognized."""
        return NodeLabel.parse(self.label)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "label": self.label,
            "name": self.name,
            "file_path": self.file_path,
            "content": self.content,
            "start_line": self.start_line,
            "end_line": self.end_line,
        }

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any] | Sequence[Any],
        index: int | None = None,
    ) -> EmbeddableNode:
        """Create a node from a query row or decoded JSON record.

        Accepts either a mapping (snake_case or camelCase keys) or a
        positional sequence:
        (id, name, label, file_path, content, start_line, end_line)

        Args:
            row: The record to convert
            index: Position of the record in its batch, for error reporting

        Raises:
            NodeFormatError: If the record is not a mapping/sequence or lacks
                name, label or file path
        """
        values: dict[str, Any] = {}
        if isinstance(row, Mapping):
            for field_name, keys in _ROW_KEYS.items():
                for key in keys:
                    if row.get(key) is not None:
                        values[field_name] = row[key]
                        break
        elif isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
            for field_name, value in zip(_ROW_ORDER, row):
                if value is not None:
                    values[field_name] = value
        else:
            raise NodeFormatError(
                f"Node record must be an object or array, got {type(row).__name__}",
                index=index,
            )

        missing = [f for f in _REQUIRED if f not in values]
        if missing:
            raise NodeFormatError(
                f"Node record is missing {', '.join(missing)}",
                index=index,
                missing=missing,
            )

        return cls(
            label=str(values["label"]),
            name=str(values["name"]),
            file_path=str(values["file_path"]),
            content=str(values["content"]) if "content" in values else None,
            id=str(values.get("id", "")),
            start_line=values.get("start_line"),
            end_line=values.get("end_line"),
        )


__all__ = [
    "NodeLabel",
    "EmbeddableNode",
    "EMBEDDABLE_LABELS",
    "is_embeddable_label",
]
