from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """Result of a lookup which may or may not have found a value.

    Unlike a bare `None` check, presence is tracked separately from the
    wrapped value, so a stored `None` is still reported as present. Use the
    `of()` and `empty()` constructors rather than instantiating directly."""

    __slots__ = ("_inner", "_present")

    def __init__(self, inner: Optional[T], present: bool) -> None:
        self._inner = inner
        self._present = present

    @classmethod
    def of(cls, inner: T) -> "Maybe[T]":
        return cls(inner, True)

    @classmethod
    def empty(cls) -> "Maybe[Any]":
        return NOT_FOUND

    def __bool__(self):
        return self._present

    def __eq__(self, other):
        if isinstance(other, Maybe):
            return self._present == other.is_present and self._inner == other.value
        return self._present and self._inner == other

    def __repr__(self):
        if not self._present:
            return "Maybe.empty()"
        return f"Maybe.of({self._inner!r})"

    def __reduce__(self):
        return Maybe, (self._inner, self._present)

    def or_else(self, else_fn: Callable[[], T]) -> T:
        if not self._present:
            return else_fn()
        return self._inner  # type: ignore[return-value]

    def or_else_get(self, else_v: T) -> T:
        if not self._present:
            return else_v
        return self._inner  # type: ignore[return-value]

    def or_else_raise(self, raise_fn: Callable[[], Exception]) -> T:
        if not self._present:
            raise raise_fn()
        return self._inner  # type: ignore[return-value]

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        if not self._present:
            return NOT_FOUND
        return Maybe.of(f(self._inner))  # type: ignore[arg-type]

    @property
    def value(self) -> Optional[T]:
        return self._inner

    @property
    def is_present(self) -> bool:
        return self._present


NOT_FOUND: Maybe[Any] = Maybe(None, False)
