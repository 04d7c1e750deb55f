"""Dictionary-like operations over ordered property lists.

A property list is an ordered sequence of `(key, value)` pairs with string
keys. Unlike a dict, keys may repeat; the earliest pair for a key is its
"first occurrence" and is the one returned by lookups.

Every function accepts a `PropList` or a plain `list`/`tuple` of pairs and
never modifies its input. Functions returning a property list always return
a new `PropList`."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from pyrsistent import PVector, pvector
from typing_extensions import TypeAlias

from proplist.lang.exception import InvalidPairError, PropListKeyError
from proplist.util import Maybe

logger = logging.getLogger(__name__)

V = TypeVar("V")

_ABSENT = object()


class PropList(Sequence, Generic[V]):
    """Immutable property list. Delegates internally to a pyrsistent.PVector
    of `(key, value)` tuples.

    Do not instantiate directly. Instead use the new() and plist() factory
    functions below."""

    __slots__ = ("_inner",)

    def __init__(self, wrapped: "PVector[tuple[str, V]]") -> None:
        self._inner = wrapped

    def __add__(self, other):
        if not isinstance(other, (PropList, list, tuple)):
            return NotImplemented
        return PropList(self._inner.extend(_coerce(other)))

    def __radd__(self, other):
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return PropList(_coerce(other).extend(self._inner))

    def __contains__(self, item):
        return item in self._inner

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, PropList):
            return self._inner == other._inner
        if isinstance(other, (list, tuple)):
            return len(self) == len(other) and all(
                a == b for a, b in zip(self._inner, other)
            )
        return NotImplemented

    def __getitem__(self, item):
        if isinstance(item, slice):
            return PropList(self._inner[item])
        return self._inner[item]

    def __hash__(self):
        return hash(tuple(self._inner))

    def __iter__(self):
        yield from self._inner

    def __len__(self):
        return len(self._inner)

    def __reduce__(self):
        return PropList, (self._inner,)

    def __repr__(self):
        return f"proplist({self._inner.tolist()!r})"


EMPTY: PropList = PropList(pvector())

PropListLike: TypeAlias = Union[PropList[V], Sequence[tuple[str, V]]]


def _is_pair(o) -> bool:
    return isinstance(o, tuple) and len(o) == 2 and isinstance(o[0], str)


def _check_key(key) -> None:
    if not isinstance(key, str):
        raise TypeError(f"Property list keys must be str, not {type(key).__name__}")


def _check_callable(f, name: str) -> None:
    if not callable(f):
        raise TypeError(f"{name} must be callable, not {type(f).__name__}")


def _check_keys(keys) -> frozenset:
    if isinstance(keys, str) or not isinstance(keys, Iterable):
        raise TypeError(
            f"Expected a collection of str keys, not {type(keys).__name__}"
        )
    ks = frozenset(keys)
    for k in ks:
        _check_key(k)
    return ks


def _coerce(proplist) -> "PVector[tuple[str, Any]]":
    """Return the backing vector for `proplist`, checking the shape of plain
    Python sequences on the way in."""
    if isinstance(proplist, PropList):
        return proplist._inner  # pylint: disable=protected-access
    if isinstance(proplist, (list, tuple)):
        for elem in proplist:
            if not _is_pair(elem):
                raise TypeError(
                    f"Property list elements must be (str, value) pairs, not {elem!r}"
                )
        return pvector(proplist)
    raise TypeError(
        "Expected a property list or a sequence of pairs, "
        f"not {type(proplist).__name__}"
    )


def _wrap(proplist) -> PropList:
    if isinstance(proplist, PropList):
        return proplist
    return PropList(_coerce(proplist))


def _find_first(inner: PVector, key: str) -> int:
    for i, (k, _) in enumerate(inner):
        if k == key:
            return i
    return -1


def _replace_at(inner: PVector, i: int, value) -> PVector:
    """Set the value of the pair at index `i` and remove every later pair
    sharing its key."""
    key = inner[i][0]
    head = inner[:i].append((key, value))
    return head.extend(p for p in inner[i + 1 :] if p[0] != key)


###############
# Construction
###############


def new(
    pairs: Union[Iterable[Any], Mapping[str, V]] = (),
    transform: Optional[Callable[[Any], tuple[str, V]]] = None,
) -> PropList[V]:
    """Create a property list with unique keys from `pairs`.

    Pairs are applied in order as if by `put`, so a repeated key keeps the
    value of its last write and the most recently written key comes first.
    Mappings are consumed through their items.

    If `transform` is given, each element of `pairs` is passed through it and
    the result must be a `(str, value)` pair; otherwise an `InvalidPairError`
    is raised and construction stops."""
    if isinstance(pairs, Mapping):
        pairs = pairs.items()

    if transform is None:
        items = []
        for pair in pairs:
            if not _is_pair(pair):
                raise TypeError(
                    f"Property list elements must be (str, value) pairs, not {pair!r}"
                )
            items.append(pair)
    else:
        _check_callable(transform, "transform")
        items = []
        for item in pairs:
            result = transform(item)
            if not _is_pair(result):
                logger.debug("Transform produced an invalid pair for %r", item)
                raise InvalidPairError(item, result)
            items.append(result)

    # Folding `put` left to right leaves keys ordered by their last write, most
    # recent first; scanning backwards and keeping unseen keys is equivalent.
    seen: set[str] = set()
    unique = []
    for k, v in reversed(items):
        if k not in seen:
            seen.add(k)
            unique.append((k, v))
    if not unique:
        return EMPTY
    return PropList(pvector(unique))


def plist(*pairs: tuple[str, V]) -> PropList[V]:
    """Create a property list from the given pairs as they are, keeping their
    order and any duplicate keys."""
    return PropList(_coerce(pairs))


#########
# Lookup
#########


def get(proplist: PropListLike, key: str, default=None):
    """Return the value of the first pair for `key`, or `default`."""
    _check_key(key)
    for k, v in _coerce(proplist):
        if k == key:
            return v
    return default


def fetch(proplist: PropListLike, key: str) -> Maybe:
    """Return the value of the first pair for `key` wrapped in a `Maybe`.

    The returned `Maybe` is empty when `key` is absent, which allows callers to
    tell a missing key apart from a key stored with a `None` value."""
    v = get(proplist, key, _ABSENT)
    if v is _ABSENT:
        return Maybe.empty()
    return Maybe.of(v)


def fetch_strict(proplist: PropListLike, key: str):
    """Return the value of the first pair for `key`, raising a
    `PropListKeyError` if there is none."""
    v = get(proplist, key, _ABSENT)
    if v is _ABSENT:
        logger.debug("Key %r not found for strict fetch", key)
        raise PropListKeyError(key, _wrap(proplist))
    return v


def get_values(proplist: PropListLike, key: str) -> PVector:
    """Return the values of every pair for `key` in list order."""
    _check_key(key)
    return pvector(v for k, v in _coerce(proplist) if k == key)


def has_key(proplist: PropListLike, key: str) -> bool:
    _check_key(key)
    return any(k == key for k, _ in _coerce(proplist))


def keys(proplist: PropListLike) -> PVector:
    """Return every key in list order, including duplicates."""
    return pvector(k for k, _ in _coerce(proplist))


def values(proplist: PropListLike) -> PVector:
    """Return every value in list order, including those of duplicate keys."""
    return pvector(v for _, v in _coerce(proplist))


def size(proplist: PropListLike) -> int:
    return len(_coerce(proplist))


###########
# Mutation
###########


def put(proplist: PropListLike, key: str, value) -> PropList:
    """Remove every pair for `key` and put `(key, value)` at the front."""
    _check_key(key)
    inner = _coerce(proplist)
    return PropList(pvector([(key, value)]).extend(p for p in inner if p[0] != key))


def put_new(proplist: PropListLike, key: str, value) -> PropList:
    """Put `(key, value)` at the front unless `key` is already present, in
    which case the list is returned unchanged."""
    if has_key(proplist, key):
        return _wrap(proplist)
    return PropList(pvector([(key, value)]).extend(_coerce(proplist)))


def delete(proplist: PropListLike, key: str, value=_ABSENT) -> PropList:
    """Remove every pair for `key`.

    If `value` is given, only pairs whose key and value both match are removed."""
    _check_key(key)
    inner = _coerce(proplist)
    if value is _ABSENT:
        return PropList(pvector(p for p in inner if p[0] != key))
    return PropList(pvector(p for p in inner if p[0] != key or p[1] != value))


def delete_first(proplist: PropListLike, key: str) -> PropList:
    """Remove the first pair for `key`, leaving any later duplicates."""
    _check_key(key)
    inner = _coerce(proplist)
    i = _find_first(inner, key)
    if i < 0:
        return _wrap(proplist)
    return PropList(inner.delete(i))


def update(
    proplist: PropListLike, key: str, initial, fun: Callable[[Any], Any]
) -> PropList:
    """Update the first pair for `key` with the result of calling `fun` on its
    value, removing any later pairs for `key`.

    If `key` is absent, `(key, initial)` is appended to the end of the list."""
    _check_key(key)
    _check_callable(fun, "fun")
    inner = _coerce(proplist)
    i = _find_first(inner, key)
    if i < 0:
        return PropList(inner.append((key, initial)))
    return PropList(_replace_at(inner, i, fun(inner[i][1])))


def update_strict(
    proplist: PropListLike, key: str, fun: Callable[[Any], Any]
) -> PropList:
    """Update the first pair for `key` as `update` does, raising a
    `PropListKeyError` instead of inserting if `key` is absent."""
    _check_key(key)
    _check_callable(fun, "fun")
    inner = _coerce(proplist)
    i = _find_first(inner, key)
    if i < 0:
        logger.debug("Key %r not found for strict update", key)
        raise PropListKeyError(key, _wrap(proplist))
    return PropList(_replace_at(inner, i, fun(inner[i][1])))


def pop(proplist: PropListLike, key: str, default=None) -> tuple[Any, PropList]:
    """Return the first value for `key` (or `default`) along with the list
    without any pair for `key`."""
    return get(proplist, key, default), delete(proplist, key)


def pop_first(
    proplist: PropListLike, key: str, default=None
) -> tuple[Any, PropList]:
    """Return the first value for `key` (or `default`) along with the list
    without that first pair."""
    return get(proplist, key, default), delete_first(proplist, key)


#######
# Bulk
#######


def take(
    proplist: PropListLike, keys: Iterable[str]  # pylint: disable=redefined-outer-name
) -> PropList:
    """Keep only the pairs whose key is in `keys`."""
    return split(proplist, keys)[0]


def drop(
    proplist: PropListLike, keys: Iterable[str]  # pylint: disable=redefined-outer-name
) -> PropList:
    """Remove the pairs whose key is in `keys`."""
    return split(proplist, keys)[1]


def split(
    proplist: PropListLike, keys: Iterable[str]  # pylint: disable=redefined-outer-name
) -> tuple[PropList, PropList]:
    """Partition the list into the pairs whose key is in `keys` and those
    whose key is not. Both halves keep the original order and duplicates."""
    ks = _check_keys(keys)
    taken = []
    dropped = []
    for pair in _coerce(proplist):
        if pair[0] in ks:
            taken.append(pair)
        else:
            dropped.append(pair)
    return PropList(pvector(taken)), PropList(pvector(dropped))


def equal(left: PropListLike, right: PropListLike) -> bool:
    """Return True if both lists hold the same pairs, the same number of
    times, in any order."""
    l, r = _coerce(left), _coerce(right)
    if len(l) != len(r):
        return False

    # Values need not be hashable or orderable, so match pairs by equality.
    remaining = r.tolist()
    for pair in l:
        try:
            remaining.remove(pair)
        except ValueError:
            return False
    return True


def merge(
    d1: PropListLike,
    d2: PropListLike,
    resolver: Optional[Callable[[str, Any, Any], Any]] = None,
) -> PropList:
    """Merge two property lists, preferring the pairs of `d2`.

    Without a `resolver`, the result is every pair of `d2` followed by the
    pairs of `d1` whose key does not appear in `d2`.

    With a `resolver`, the result starts from `d1`. For each key of `d2`, the
    first pair of that key in `d1` takes the value `resolver(key, v1, v2)` and
    later duplicates of it are removed, as by `update`. Keys only in `d2` are
    appended in `d2` order. Only the first pair for each key of `d2` is used."""
    inner1, inner2 = _coerce(d1), _coerce(d2)

    if resolver is None:
        keys2 = {k for k, _ in inner2}
        return PropList(inner2.extend(p for p in inner1 if p[0] not in keys2))

    _check_callable(resolver, "resolver")
    acc = inner1
    seen: set[str] = set()
    for k, v2 in inner2:
        if k in seen:
            continue
        seen.add(k)
        i = _find_first(acc, k)
        if i < 0:
            acc = acc.append((k, v2))
        else:
            acc = _replace_at(acc, i, resolver(k, acc[i][1], v2))
    return PropList(acc)


############
# Predicate
############


def is_assoc_list(value) -> bool:
    """Return True if `value` is a sequence of `(str, value)` pairs."""
    if not isinstance(value, (PropList, list, tuple)):
        return False
    return all(_is_pair(elem) for elem in value)
