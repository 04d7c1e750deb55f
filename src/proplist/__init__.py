import logging

from proplist.lang.exception import InvalidPairError, PropListKeyError
from proplist.lang.proplist import (
    EMPTY,
    PropList,
    delete,
    delete_first,
    drop,
    equal,
    fetch,
    fetch_strict,
    get,
    get_values,
    has_key,
    is_assoc_list,
    keys,
    merge,
    new,
    plist,
    pop,
    pop_first,
    put,
    put_new,
    size,
    split,
    take,
    update,
    update_strict,
    values,
)
from proplist.logconfig import configure_logger
from proplist.util import Maybe

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "InvalidPairError",
    "Maybe",
    "PropList",
    "PropListKeyError",
    "configure_logger",
    "delete",
    "delete_first",
    "drop",
    "equal",
    "fetch",
    "fetch_strict",
    "get",
    "get_values",
    "has_key",
    "is_assoc_list",
    "keys",
    "merge",
    "new",
    "plist",
    "pop",
    "pop_first",
    "put",
    "put_new",
    "size",
    "split",
    "take",
    "update",
    "update_strict",
    "values",
]
