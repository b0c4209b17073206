import json
import sys
from typing import Any, Dict, Optional, TextIO


def to_json(data: Any, indent: int = 4, ensure_ascii: bool = False) -> str:
    """
    Convert Python object to JSON string.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 4)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent)


def write_report(results: Dict[str, bool], stream: Optional[TextIO] = None) -> None:
    """Writes the selector results as a JSON object, keys in evaluation order."""
    out = stream if stream is not None else sys.stdout
    out.write(to_json(results) + "\n")
    out.flush()
