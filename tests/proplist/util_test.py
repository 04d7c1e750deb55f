import pickle

import pytest

from proplist.util import NOT_FOUND, Maybe


class TestMaybe:
    def test_maybe_is_present(self):
        assert Maybe.empty().is_present is False
        assert Maybe.of("Something").is_present
        assert Maybe.of(None).is_present

    def test_maybe_bool(self):
        assert not Maybe.empty()
        assert Maybe.of(None)
        assert Maybe.of(0)

    def test_maybe_value(self):
        assert Maybe.empty().value is None
        assert Maybe.of("Something").value == "Something"

    def test_maybe_empty_is_singleton(self):
        assert Maybe.empty() is NOT_FOUND

    def test_maybe_equals(self):
        assert Maybe.of("Something") == "Something"
        assert Maybe.of("Something") == Maybe.of("Something")
        assert Maybe.empty() == Maybe.empty()
        assert Maybe.empty() != Maybe.of("Something")
        assert Maybe.empty() != Maybe.of(None)
        assert Maybe.empty() != None  # noqa: E711

    def test_maybe_or_else(self):
        assert Maybe.empty().or_else(lambda: "Not None") == "Not None"
        assert Maybe.of("Something").or_else(lambda: "Nothing") == "Something"
        assert Maybe.of(None).or_else(lambda: "Nothing") is None

    def test_maybe_or_else_get(self):
        assert Maybe.empty().or_else_get("Not None") == "Not None"
        assert Maybe.of("Something").or_else_get("Nothing") == "Something"

    def test_maybe_or_else_raise(self):
        with pytest.raises(ValueError):
            assert Maybe.empty().or_else_raise(lambda: ValueError("No value"))

        assert (
            Maybe.of("Something").or_else_raise(lambda: ValueError("No value"))
            == "Something"
        )

    def test_maybe_map(self):
        l = Maybe.of("lower")
        lmapped = l.map(lambda s: s.upper())
        assert lmapped == Maybe.of("LOWER")
        assert lmapped == "LOWER"
        assert lmapped.or_else_get("Nothing") == "LOWER"
        assert Maybe.empty().map(lambda s: s.upper()) is NOT_FOUND

    def test_maybe_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(Maybe.of(1))

    def test_maybe_repr(self):
        assert repr(Maybe.empty()) == "Maybe.empty()"
        assert repr(Maybe.of("a")) == "Maybe.of('a')"

    @pytest.mark.parametrize("m", [Maybe.empty(), Maybe.of(None), Maybe.of(3)])
    def test_maybe_pickleability(self, pickle_protocol: int, m: Maybe):
        assert m == pickle.loads(pickle.dumps(m, protocol=pickle_protocol))
