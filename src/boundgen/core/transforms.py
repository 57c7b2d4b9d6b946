from __future__ import annotations

import math
from typing import Any, TypeVar, overload

from boundgen.core import ABSENT

T = TypeVar("T")


@overload
def deepclone(value: dict) -> dict: ...  # pragma: no cover


@overload
def deepclone(value: list) -> list: ...  # pragma: no cover


@overload
def deepclone(value: T) -> T: ...  # pragma: no cover


def deepclone(value: Any) -> Any:
    """A specialized version of `deepcopy` that copies only `dict` and `list`.

    Witnesses are plain JSON-like trees, so anything else is immutable and is shared as is.
    """
    if isinstance(value, dict):
        return {key: deepclone(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deepclone(item) for item in value]
    return value


def jsonify(value: Any) -> Any:
    """Convert a witness into a JSON-compatible value.

    Mirrors `JSON.stringify`: absent keys are dropped from objects, absent array items
    and non-finite numbers become `null`.
    """
    if value is ABSENT:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: jsonify(item) for key, item in value.items() if item is not ABSENT}
    if isinstance(value, list):
        return [jsonify(item) for item in value]
    return value


def is_representable(value: Any, *, _nested_in_object: bool = False) -> bool:
    """Whether `jsonify` keeps the meaning of this witness intact.

    An absent object key is representable by omitting it. Anywhere else the absence
    marker, as well as NaN and the infinities, has no JSON counterpart.
    """
    if value is ABSENT:
        return _nested_in_object
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(is_representable(item, _nested_in_object=True) for item in value.values())
    if isinstance(value, list):
        return all(is_representable(item) for item in value)
    return True
