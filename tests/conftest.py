# tests/conftest.py

import pytest

from models.student import Student
from models.student_store import StudentStore


@pytest.fixture
def sample_store():
    return StudentStore()


@pytest.fixture
def empty_store():
    return StudentStore(seed_sample_data=False)


@pytest.fixture
def sample_student():
    return Student(4, "Dana", 23, "b+", "Physics")


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Replaces `input()` with a queue of scripted answers.

    Usage: `scripted_input("1", "Alice")`. Running out of answers raises `AssertionError`.
    """

    def install(*answers):
        remaining = list(answers)

        def fake_input(_prompt=""):
            assert remaining, "input() called more times than answers were scripted"
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return remaining

    return install
