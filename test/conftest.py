import pytest

from scritto.config import config
from scritto.grouping import beat, measure, measuresFromTimesig
from scritto.notes import SingleNote


@pytest.fixture(autouse=True)
def restoreConfig():
    saved = dict(config)
    yield config
    config.update(saved)


@pytest.fixture
def fourFour():
    """One measure of four quarter-note beats"""
    return measuresFromTimesig("4/4")


@pytest.fixture
def threeFourTwice():
    return [measure([beat((1, 4)), beat((1, 4)), beat((1, 4))]) for _ in range(2)]


@pytest.fixture
def scale():
    return [SingleNote(60, (1, 2)), SingleNote(62, (1, 4)), SingleNote(64, (1, 4))]
