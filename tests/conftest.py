import pytest

from modality import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class Recorder(list):
    """
    A callback that remembers what it was called with
    """

    def __call__(self, arg=None):
        self.append(arg)


@pytest.fixture
def make_recorder():
    return Recorder
