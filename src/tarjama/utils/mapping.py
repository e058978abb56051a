import json
from pathlib import Path

from tarjama.errors import ProcessingError


def read_json_mapping(path: str | Path) -> dict:
    """Load a JSON object of key -> text from a file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProcessingError(f"Could not read JSON from {path}") from e

    if not isinstance(data, dict):
        raise ProcessingError(f"{path} does not hold a JSON object")
    return data
