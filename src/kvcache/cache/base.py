"""Cache protocol and the argument checks every implementation shares."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from kvcache.models import InvalidArgumentError, InvalidCollectionError, InvalidKeyError

Key = str | int | float | bool
TTL = int | float | timedelta | str | None

_SCALAR_TYPES = (str, int, float)  # bool is an int
_TTL_ADAPTER: TypeAdapter[timedelta] = TypeAdapter(timedelta)


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

@runtime_checkable
class CacheInterface(Protocol):
    """Operations shared by every cache backend.

    ``has`` is only a hint when an instance is shared; re-check with ``get``.
    """

    def get(self, key: Key, default: Any = None) -> Any: ...

    def set(self, key: Key, value: Any, ttl: TTL = None) -> bool: ...

    def delete(self, key: Key) -> bool: ...

    def clear(self) -> bool: ...

    def get_multiple(self, keys: Iterable[Key], default: Any = None) -> dict[Key, Any]: ...

    def set_multiple(
        self, values: Mapping[Key, Any] | Iterable[tuple[Key, Any]], ttl: TTL = None
    ) -> bool: ...

    def delete_multiple(self, keys: Iterable[Key]) -> bool: ...

    def has(self, key: Key) -> bool: ...


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_key(key: Any) -> None:
    """Raise InvalidKeyError unless *key* is a str, int, float or bool."""
    if not isinstance(key, _SCALAR_TYPES):
        raise InvalidKeyError(f"The '{key!r}' is not a valid key!")


def validate_keys(keys: Any) -> list[Key]:
    """Materialise a bulk key argument.

    A bare string is rejected rather than iterated character by character.
    Every key is checked before the list is returned, so callers can apply
    the whole batch knowing no key will fail half-way through.
    """
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidCollectionError("Collection is not iterable")

    materialised = list(keys)
    for key in materialised:
        validate_key(key)
    return materialised


def validate_pairs(values: Any) -> list[tuple[Key, Any]]:
    """Materialise a mapping or an iterable of (key, value) pairs."""
    if isinstance(values, Mapping):
        pairs = list(values.items())
    elif isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidCollectionError("Collection is not iterable")
    else:
        pairs = []
        for item in values:
            if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
                raise InvalidCollectionError(f"Expected a (key, value) pair, got {item!r}")
            pair = tuple(item)
            if len(pair) != 2:
                raise InvalidCollectionError(f"Expected a (key, value) pair, got {item!r}")
            pairs.append(pair)

    for key, _ in pairs:
        validate_key(key)
    return pairs


def ttl_to_seconds(ttl: Any) -> float | None:
    """Convert a TTL argument to seconds.

    Accepts None (no expiry), a number of seconds, a ``timedelta`` or an
    ISO 8601 duration string such as ``"PT5M"``. Zero and negative values are
    allowed and produce entries that are already expired.
    """
    if ttl is None:
        return None
    if isinstance(ttl, bool):
        raise InvalidArgumentError(f"Invalid TTL value: {ttl!r}")
    if isinstance(ttl, (int, float)):
        if ttl != ttl:  # NaN
            raise InvalidArgumentError(f"Invalid TTL value: {ttl!r}")
        try:
            return float(ttl)
        except OverflowError:
            return math.inf if ttl > 0 else -math.inf
    try:
        return _TTL_ADAPTER.validate_python(ttl).total_seconds()
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid TTL value: {ttl!r}") from exc
