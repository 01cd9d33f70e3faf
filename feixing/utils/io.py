"""Reader for the bundled reference tables."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

__all__ = ["load_json_document"]


def load_json_document(path: str | Path, *, comment_prefix: str = "#") -> Any:
    """Return the JSON content of ``path``.

    Lines starting with ``comment_prefix`` (after leading whitespace) are
    dropped first; the tables use them to name their sources.
    """

    text = Path(path).read_text(encoding="utf-8")
    lines = (line for line in text.splitlines() if not line.lstrip().startswith(comment_prefix))
    return json.loads("\n".join(lines))
