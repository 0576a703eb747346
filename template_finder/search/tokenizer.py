"""
Mixed-script tokenizer.

Latin text splits into maximal alphanumeric runs, ideographic text into single
characters. Everything else is dropped before scanning.
"""
from __future__ import annotations

import re
from typing import Iterable

TokenSet = tuple[str, ...]

CJK_START = "一"
CJK_END = "龥"

_STRIP_RE = re.compile(r"[^a-z0-9\s一-龥]")


def is_cjk(char: str) -> bool:
    return CJK_START <= char <= CJK_END


def normalize(text: str | None) -> str:
    return _STRIP_RE.sub("", (text or "").lower())


def tokenize(text: str | None) -> TokenSet:
    """
    Turn free text into a deduplicated, order-preserving token set.

    Examples:
        "Hello  World" -> ("hello", "world")
        "表格table2"    -> ("表", "格", "table2")
    """
    tokens: list[str] = []
    run: list[str] = []

    for char in normalize(text):
        if is_cjk(char):
            if run:
                tokens.append("".join(run))
                run = []
            tokens.append(char)
        elif char.isspace():
            if run:
                tokens.append("".join(run))
                run = []
        else:
            run.append(char)
    if run:
        tokens.append("".join(run))

    return tuple(dict.fromkeys(t for t in tokens if t.strip()))


def tokenize_many(texts: Iterable[str]) -> TokenSet:
    # Flattened, not deduplicated across texts: a token that shows up in two
    # history entries counts twice.
    flat: list[str] = []
    for text in texts:
        flat.extend(tokenize(text))
    return tuple(flat)
