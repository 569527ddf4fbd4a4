import pytest

from facadebind import Facade


@pytest.fixture(autouse=True)
def _reset_facade_container():
    Facade.clear_container()
    yield
    Facade.clear_container()
