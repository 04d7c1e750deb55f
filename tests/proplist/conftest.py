import pytest


@pytest.fixture(params=[3, 4, 5])
def pickle_protocol(request) -> int:
    return request.param
