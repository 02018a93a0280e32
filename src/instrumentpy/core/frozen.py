"""Read-only collections embedded in span snapshots.

Snapshots never alias caller-owned containers: every collection handed to
them is copied into one of the types below. Empty input always resolves to
the shared EMPTY_LIST / EMPTY_ATTRIBUTES instances.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, NoReturn

from instrumentpy.core.errors import UnsupportedMutationError

AttributeValue = str | bool | int | float | Sequence[str | bool | int | float]


_PRIMITIVE_TYPES = (str, bool, int, float)


def _freeze_value(key: str, value: Any) -> AttributeValue:
    if isinstance(value, _PRIMITIVE_TYPES):
        return value
    if isinstance(value, (list, tuple)) and all(
        isinstance(item, _PRIMITIVE_TYPES) for item in value
    ):
        return tuple(value)
    raise TypeError(
        f"Attribute {key!r} has unsupported value type {type(value).__name__}"
    )


def _reject(self: object, *args: Any, **kwargs: Any) -> NoReturn:
    raise UnsupportedMutationError(f"{type(self).__name__} is read-only")


class FrozenList(tuple):  # type: ignore[type-arg]
    """Tuple that answers list-style mutators with UnsupportedMutationError.

    Plain tuples raise AttributeError for ``append`` and friends; consumers
    written against list semantics get a clear error instead.
    """

    __slots__ = ()

    append = _reject
    extend = _reject
    insert = _reject
    remove = _reject
    pop = _reject
    clear = _reject
    sort = _reject
    reverse = _reject
    __setitem__ = _reject
    __delitem__ = _reject
    __iadd__ = _reject
    __imul__ = _reject

    def __repr__(self) -> str:
        return f"FrozenList({list(self)!r})"


class FrozenAttributes(Mapping[str, AttributeValue]):
    """Immutable, hashable copy of an attribute mapping.

    Args:
        attributes: Source mapping. List and tuple values are copied into
            tuples.

    Raises:
        TypeError: If a value is not a str, bool, int, float, or a list or
            tuple of those.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, attributes: Mapping[str, AttributeValue] | None = None) -> None:
        self._data: dict[str, AttributeValue] = {
            key: _freeze_value(key, value)
            for key, value in (attributes or {}).items()
        }
        self._hash: int | None = None

    def __getitem__(self, key: str) -> AttributeValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenAttributes({self._data!r})"

    __setitem__ = _reject
    __delitem__ = _reject
    update = _reject
    pop = _reject
    popitem = _reject
    setdefault = _reject
    clear = _reject


EMPTY_LIST: FrozenList = FrozenList()
EMPTY_ATTRIBUTES: FrozenAttributes = FrozenAttributes()


def freeze_list(items: Iterable[Any] | None) -> FrozenList:
    """Copy items into a FrozenList.

    Args:
        items: Any iterable, or None.

    Returns:
        EMPTY_LIST for None or empty input, the input itself when it is
        already a FrozenList, otherwise a new FrozenList.
    """
    if isinstance(items, FrozenList):
        return items or EMPTY_LIST
    if items is None:
        return EMPTY_LIST
    frozen = FrozenList(items)
    return frozen if frozen else EMPTY_LIST


def freeze_attributes(
    attributes: Mapping[str, AttributeValue] | None,
) -> FrozenAttributes:
    """Copy an attribute mapping into FrozenAttributes.

    Args:
        attributes: Mapping of attribute names to values, or None.

    Returns:
        EMPTY_ATTRIBUTES for None or empty input, the input itself when it is
        already frozen, otherwise a new FrozenAttributes.
    """
    if isinstance(attributes, FrozenAttributes):
        return attributes if attributes else EMPTY_ATTRIBUTES
    if not attributes:
        return EMPTY_ATTRIBUTES
    return FrozenAttributes(attributes)
