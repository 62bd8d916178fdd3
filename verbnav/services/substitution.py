"""Placeholder substitution for verb command templates.

A placeholder is an opening brace, a non-empty run of word characters or
dots, and a closing brace. Each one is replaced left to right in a single
pass; replacement text is never rescanned. There is no escape mechanism for
literal braces.
"""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path
from typing import Callable, Dict, Iterator, Tuple, Union

UNKNOWN_TOKEN = "-hu?-"

PathLike = Union[str, bytes, Path]


def display_path(path: PathLike) -> str:
    """Render a path as text, replacing undecodable bytes."""
    return os.fsencode(path).decode("utf-8", errors="replace")


_WORD_CATEGORIES = frozenset({"Mn", "Mc", "Me", "Nd", "Nl", "Pc"})


def _is_identifier_char(ch: str) -> bool:
    """Unicode word character or a dot. Other numbers such as ``½`` are excluded."""
    if ch == ".":
        return True
    return ch.isalpha() or unicodedata.category(ch) in _WORD_CATEGORIES


def iter_tokens(template: str) -> Iterator[Tuple[bool, str]]:
    """Yield ``(is_placeholder, text)`` chunks of a template.

    For placeholders ``text`` is the bare identifier.
    """
    literal_start = 0
    i = 0
    length = len(template)
    while i < length:
        if template[i] != "{":
            i += 1
            continue
        j = i + 1
        while j < length and _is_identifier_char(template[j]):
            j += 1
        if j > i + 1 and j < length and template[j] == "}":
            if literal_start < i:
                yield False, template[literal_start:i]
            yield True, template[i + 1 : j]
            i = j + 1
            literal_start = i
        else:
            i = j if j > i + 1 else i + 1
    if literal_start < length:
        yield False, template[literal_start:]


def substitute(template: str, path: PathLike) -> str:
    """Expand every placeholder of ``template`` against the selected path."""
    resolvers: Dict[str, Callable[[], str]] = {
        "file": lambda: display_path(path),
    }
    parts = []
    for is_placeholder, text in iter_tokens(template):
        if not is_placeholder:
            parts.append(text)
            continue
        resolver = resolvers.get(text)
        parts.append(resolver() if resolver else UNKNOWN_TOKEN)
    return "".join(parts)
