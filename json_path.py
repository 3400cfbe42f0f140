"""
Dotted / indexed lookups into decoded JSON.

    get_path(doc, "data.email")
    get_path(doc, "[1].name")
    get_path(doc, "items[0].tags[2].name")
"""
import re
from typing import Any, List, Union

Segment = Union[str, int]

_TOKEN = re.compile(r"\[(\d+)\]|([^.\[\]]+)")


class JsonPathError(AssertionError):
    pass


def parse_path(expr: str) -> List[Segment]:
    if not isinstance(expr, str) or not expr.strip():
        raise JsonPathError(f"Empty JSON path: {expr!r}")

    segments: List[Segment] = []
    pos = 0
    while pos < len(expr):
        dotted = bool(segments) and expr[pos] == "."
        if dotted:
            pos += 1
        match = _TOKEN.match(expr, pos)
        if match is None:
            raise JsonPathError(f"Malformed JSON path {expr!r} at position {pos}")
        index, key = match.groups()
        # keys after the first segment need a dot, indices must not have one
        if (key is not None and segments and not dotted) or (index is not None and dotted):
            raise JsonPathError(f"Malformed JSON path {expr!r} at position {pos}")
        segments.append(int(index) if index is not None else key)
        pos = match.end()

    return segments


def get_path(document: Any, expr: str) -> Any:
    node = document
    walked = ""
    for segment in parse_path(expr):
        if isinstance(segment, int):
            if not isinstance(node, list):
                raise JsonPathError(
                    f"Path {expr!r}: cannot index [{segment}] into {type(node).__name__} at {walked or '<root>'}"
                )
            if segment >= len(node):
                raise JsonPathError(
                    f"Path {expr!r}: index [{segment}] out of range, {walked or '<root>'} has {len(node)} item(s)"
                )
            node = node[segment]
            walked += f"[{segment}]"
        else:
            if not isinstance(node, dict):
                raise JsonPathError(
                    f"Path {expr!r}: cannot read key {segment!r} from {type(node).__name__} at {walked or '<root>'}"
                )
            if segment not in node:
                raise JsonPathError(
                    f"Path {expr!r}: key {segment!r} not found at {walked or '<root>'}; keys={sorted(node)}"
                )
            node = node[segment]
            walked += f".{segment}" if walked else segment
    return node
