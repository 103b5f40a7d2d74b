import pytest


class FixedSecret:
    """Stands in for random.Random, always drawing the same secret."""

    def __init__(self, secret):
        self.secret = secret

    def randint(self, a, b):
        return self.secret


@pytest.fixture
def fixed_secret():
    return FixedSecret
