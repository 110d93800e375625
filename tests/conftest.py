import pytest

from puzzle import PuzzleChecker


@pytest.fixture
def checker():
    return PuzzleChecker()
