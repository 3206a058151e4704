from lazyseq.core import LazyList

import pytest


class ForcedTooFar(Exception):
    pass


def _explode():
    raise ForcedTooFar('forced a layer that should have stayed lazy')


@pytest.fixture
def bomb():
    # A list that must never be forced
    return LazyList.defer(_explode)


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self, value=None):
        self.count += 1
        return value

@pytest.fixture
def counter():
    return Counter()
