import pytest
from phy.channel import Channel
from utils.random_variate import RandomVariate


class NeverCollide:
    """Scripted random source that always draws the top of the range, so no attempt ever collides"""

    def next_uniform(self):
        return 0.999

    def next_int(self, n):
        return n - 1


class AlwaysCollide:
    """Scripted random source that always draws zero, so every contention attempt collides"""

    def next_uniform(self):
        return 0.0

    def next_int(self, n):
        return 0


@pytest.fixture
def never_collide():
    return NeverCollide()


@pytest.fixture
def always_collide():
    return AlwaysCollide()


@pytest.fixture
def seeded():
    return RandomVariate(2025)


@pytest.fixture
def channel():
    return Channel('Test_Channel')
