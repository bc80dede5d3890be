import pytest

from martian_robots.model import CommandRegistry, World


@pytest.fixture
def world():
    return World(5, 3)


@pytest.fixture
def registry():
    return CommandRegistry.with_defaults()
