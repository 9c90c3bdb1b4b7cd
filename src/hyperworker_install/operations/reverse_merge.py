"""Reverse merge of JSON-like settings trees.

In a reverse merge the existing (target) value always wins and the incoming
(source) template only fills gaps:

- Both values are lists: target's list, then every source element not already
  in it, in source order (set union, target first).
- Both values are dicts: merge recursively with the same rules.
- Target has a non-null value: keep it.
- Target is missing or null: take source's value.

Neither argument is mutated, and the result shares no mutable structure with
either argument.
"""

import copy
from typing import Any


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality over JSON values.

    Differs from == in that booleans never equal numbers (True != 1), matching
    JSON's distinct true/1 values. Integers and floats compare numerically.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right, strict=True))

    if isinstance(left, (dict, list)) or isinstance(right, (dict, list)):
        return False

    return left == right


def _union(target: list[Any], source: list[Any]) -> list[Any]:
    result = copy.deepcopy(target)
    for item in source:
        if not any(json_equal(item, existing) for existing in target):
            result.append(copy.deepcopy(item))
    return result


def _merge_value(target: Any, source: Any) -> Any:
    if isinstance(target, list) and isinstance(source, list):
        return _union(target, source)

    if isinstance(target, dict) and isinstance(source, dict):
        return _merge_dicts(target, source)

    if target is not None:
        return copy.deepcopy(target)

    return copy.deepcopy(source)


def _merge_dicts(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    # Target keys first so an unchanged document keeps its original key order.
    keys = list(target)
    keys.extend(key for key in source if key not in target)

    return {key: _merge_value(target.get(key), source.get(key)) for key in keys}


def reverse_merge(target: Any, source: Any) -> Any:
    """Merge source into target with target-priority semantics.

    Args:
        target: Existing settings (wins on conflict); None means absent
        source: Template settings (fills gaps); None means absent

    Returns:
        A new merged value. Two absent inputs give an empty dict; one absent
        input gives a deep copy of the other.

    Example:
        >>> reverse_merge({"env": {"X": "user"}}, {"env": {"X": "tpl", "Y": "2"}})
        {'env': {'X': 'user', 'Y': '2'}}
    """
    if target is None and source is None:
        return {}
    if target is None:
        return copy.deepcopy(source)
    if source is None:
        return copy.deepcopy(target)

    return _merge_value(target, source)
