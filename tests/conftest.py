import pytest

XD = [-1, 0, 1, 2, 3, 5, 7, 9]
YD = [-1, 3, 2.5, 5, 4, 2, 5, 4]


@pytest.fixture
def xd():
    return list(XD)


@pytest.fixture
def yd():
    return list(YD)
