import logging

import pytest

import proplist
from proplist.lang import proplist as plist


@pytest.mark.parametrize("name", proplist.__all__)
def test_public_names_exported(name: str):
    assert hasattr(proplist, name)


def test_functions_are_reexported():
    assert proplist.put is plist.put
    assert proplist.EMPTY is plist.EMPTY


def test_package_logger_left_to_application():
    logger = logging.getLogger("proplist")
    assert logging.NOTSET == logger.level
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_package_usage():
    l = proplist.new([("a", 1), ("b", 2)])
    l = proplist.update(l, "a", 0, lambda v: v + 1)
    assert 2 == proplist.get(l, "a")
    assert proplist.fetch(l, "c").or_else_get("missing") == "missing"
