"""
Track exporter - JSON encoding of tracks for the game importer.

Provides:
- Field renaming to the game's camelCase schema
- Conversion of track entities to plain JSON trees
- JSON text encoding and file writing
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict
import json
import logging
import numpy as np


logger = logging.getLogger(__name__)

# Python attribute name -> JSON field name expected by the game
FIELD_NAMES: Dict[str, str] = {
    "start_position": "startPosition",
    "start_velocity": "startVelocity",
    "kind": "type",
    "left_extended": "leftExtended",
    "right_extended": "rightExtended",
}


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        return super().default(obj)


def field_name(name: str) -> str:
    """JSON field name for an attribute name."""
    return FIELD_NAMES.get(name, name)


def to_field_tree(obj: Any) -> Any:
    """Convert a track entity to a tree of dicts, lists and scalars.

    Dataclass fields keep their declaration order and are renamed
    through FIELD_NAMES. None values are kept (encoded as null), and
    NaN or infinite floats become None.

    Args:
        obj: Entity, list of entities, or scalar

    Returns:
        JSON-compatible tree
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            field_name(f.name): to_field_tree(getattr(obj, f.name))
            for f in fields(obj)
        }
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, list):
        return [to_field_tree(item) for item in obj]
    if isinstance(obj, (float, np.floating)) and not np.isfinite(obj):
        return None
    if isinstance(obj, str):
        # Drop str subclasses such as Version
        return str(obj)
    return obj


def dumps(tree: Any, indent: int | None = None) -> str:
    """Encode a field tree as JSON text.

    Args:
        tree: Output of to_field_tree
        indent: Pretty-print indent. Compact output if None.

    Returns:
        JSON text
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        tree, indent=indent, separators=separators, allow_nan=False, cls=NumpyEncoder
    )


def write_text(path: str | Path, text: str) -> Path:
    """Write a complete JSON document, replacing any existing file.

    Args:
        path: Output file path. Parent directory must exist.
        text: Document text

    Returns:
        Path to written file

    Raises:
        OSError: If the file cannot be written
    """
    output_file = Path(path)
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(text)

    logger.info(f"Wrote {len(text)} characters to {output_file}")
    return output_file
