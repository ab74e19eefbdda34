import re
from typing import Any, Iterable

_KEY_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]+\])*)$")
_PART_RE = re.compile(r"\[([^\[\]]+)\]")


def split_form_key(key: str) -> list[str]:
    """``translations[en][title]`` -> ``["translations", "en", "title"]``"""
    match = _KEY_RE.match(key)
    if not match:
        raise ValueError(f"Malformed form field name: {key!r}")
    return [match.group(1), *_PART_RE.findall(match.group(2))]


def unflatten_form(items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Turn bracket-named multipart fields into the nested dict BannerService.save expects."""
    result: dict[str, Any] = {}
    for key, value in items:
        *parents, leaf = split_form_key(key)
        node = result
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ValueError(f"Form field {key!r} conflicts with {part!r}")
            node = child
        if isinstance(node.get(leaf), dict):
            raise ValueError(f"Form field {key!r} conflicts with a nested field")
        node[leaf] = value
    return result
