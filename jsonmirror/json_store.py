from __future__ import annotations

import json
from pathlib import Path
from typing import Any

INDENT_WIDTH = 2


def read_json(path: Path) -> Any:
    """
    Read and decode the JSON document stored at `path`.

    Missing files raise FileNotFoundError and undecodable text raises
    json.JSONDecodeError; callers decide what either means.
    """
    raw = path.read_text(encoding="utf-8")
    return json.loads(raw)


def dumps_json(payload: Any, *, indented: bool = False) -> str:
    if indented:
        return json.dumps(payload, indent=INDENT_WIDTH, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def write_json(path: Path, payload: Any, *, indented: bool = False) -> None:
    """
    Serialize `payload` and overwrite `path` with it in place.

    Not atomic: a crash mid-write can leave the file truncated.
    """
    text = dumps_json(payload, indented=indented)
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
