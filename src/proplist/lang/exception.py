from typing import Any

import attr


@attr.define(repr=False, str=False)
class PropListKeyError(KeyError):
    """Raised when a key required by a strict lookup or update is absent.

    `term` is the property list which was searched, kept for diagnostics."""

    key: str
    term: Any

    def __repr__(self):
        return f"proplist.lang.exception.PropListKeyError({self.key!r}, {self.term!r})"

    def __str__(self):
        return f"key {self.key!r} not found in: {self.term!r}"


@attr.define(repr=False, str=False)
class InvalidPairError(TypeError):
    """Raised when a transform passed to `new` does not produce a `(key, value)`
    pair with a string key. `item` is the input element and `result` is what
    the transform returned for it."""

    item: Any
    result: Any

    def __repr__(self):
        return (
            f"proplist.lang.exception.InvalidPairError({self.item!r}, {self.result!r})"
        )

    def __str__(self):
        return (
            f"transform must return a (str, value) pair; "
            f"got {self.result!r} for {self.item!r}"
        )
