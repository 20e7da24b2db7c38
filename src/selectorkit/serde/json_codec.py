"""JSON helpers: compact serialization and typed deserialization.

``from_json`` never swaps an object's class after the fact; it parses into
plain Python values and then calls the target type's constructor with the
keys that constructor accepts.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import ShapeBindingError

__all__ = ["ParseError", "to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

ParseError = json.JSONDecodeError


def _encode_default(obj: Any) -> Any:
    """Fallback encoder for objects the json module does not know."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__") and not isinstance(obj, type):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Return the compact JSON representation of *value*.

    Keys keep insertion order and non-ASCII text is left unescaped::

        to_json([1, 2, 3])                     # '[1,2,3]'
        to_json({"width": 10, "height": 20})   # '{"width":10,"height":20}'

    NaN and infinities have no JSON form and raise ValueError.
    """
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_encode_default,
    )


def _accepted_fields(shape: type) -> tuple[set[str] | None, set[str]]:
    """Return (accepted keyword names, required names) for *shape*.

    ``None`` as the first element means the constructor takes ``**kwargs``.
    """
    if dataclasses.is_dataclass(shape):
        accepted: set[str] = set()
        required: set[str] = set()
        for f in dataclasses.fields(shape):
            if not f.init:
                continue
            accepted.add(f.name)
            if (
                f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING
            ):
                required.add(f.name)
        return accepted, required

    try:
        signature = inspect.signature(shape)
    except (TypeError, ValueError):
        # Builtins such as dict expose no signature but accept any keyword.
        return None, set()

    accepted = set()
    required = set()
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_KEYWORD:
            return None, required
        if param.kind in (
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        ):
            accepted.add(param.name)
            if param.default is inspect.Parameter.empty:
                required.add(param.name)
    return accepted, required


def from_json(shape: type[T], text: str) -> T:
    """Parse *text* and build an instance of *shape* from its fields.

    Raises:
        ParseError: *text* is not valid JSON.
        ShapeBindingError: the payload is not an object, or a required
            constructor argument of *shape* is missing from it.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ShapeBindingError(
            f"Expected a JSON object for {shape.__name__}, got {type(data).__name__}",
            shape=shape,
        )

    if not dataclasses.is_dataclass(shape) and shape.__init__ is object.__init__:
        # No constructor to feed; copy every key onto a bare instance.
        instance = shape()
        for key, value in data.items():
            setattr(instance, key, value)
        return instance

    accepted, required = _accepted_fields(shape)
    if accepted is None:
        kwargs = dict(data)
    else:
        kwargs = {k: v for k, v in data.items() if k in accepted}
        dropped = [k for k in data if k not in accepted]
        if dropped:
            logger.debug("Dropped keys %s while binding %s", dropped, shape.__name__)

    missing = sorted(required - kwargs.keys())
    if missing:
        raise ShapeBindingError(
            f"Missing required field(s) for {shape.__name__}: {', '.join(missing)}",
            shape=shape,
        )
    return shape(**kwargs)
