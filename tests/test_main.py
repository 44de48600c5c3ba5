# tests/test_main.py

import pytest

import cli.main as main
from cli.menu_helpers import MenuSignal


def test_exit_returns_success_status(sample_store, scripted_input, capsys):
    scripted_input("0")

    with pytest.raises(SystemExit) as exc_info:
        main.run_cli(sample_store)

    assert exc_info.value.code == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_menu_lists_every_action(sample_store, scripted_input, capsys):
    scripted_input("0")

    with pytest.raises(SystemExit):
        main.run_cli(sample_store)

    out = capsys.readouterr().out
    for label in (
        "1. View All Students",
        "2. Add Student",
        "3. Update Student",
        "4. Delete Student",
        "5. Search Student (by Name)",
        "6. Filter Students",
        "0. Exit",
    ):
        assert label in out


def test_invalid_selection_keeps_session_alive(sample_store, scripted_input, capsys):
    remaining = scripted_input("7", "x", "1", "0")

    with pytest.raises(SystemExit):
        main.run_cli(sample_store)

    assert remaining == []
    out = capsys.readouterr().out
    assert out.count("Invalid selection") == 2
    assert "Current Students List:" in out


def test_failed_action_does_not_end_session(sample_store, scripted_input, capsys):
    remaining = scripted_input("4", "99", "1", "0")

    with pytest.raises(SystemExit) as exc_info:
        main.run_cli(sample_store)

    assert exc_info.value.code == 0
    assert remaining == []
    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out
    assert len(sample_store) == 3


def test_session_add_then_search(sample_store, scripted_input, capsys):
    scripted_input(
        "2", "4", "Dana", "23", "a", "Physics",
        "5", "dan",
        "0",
    )

    with pytest.raises(SystemExit):
        main.run_cli(sample_store)

    out = capsys.readouterr().out
    assert 'Search Results for "dan":' in out
    assert [s.name for s in sample_store.students][-1] == "Dana"


def test_main_builds_seeded_store(scripted_input, capsys):
    scripted_input("1", "0")

    with pytest.raises(SystemExit):
        main.main()

    out = capsys.readouterr().out
    assert "Alice" in out and "Bob" in out and "Charlie" in out


def test_unexpected_menu_response_is_reported(sample_store, monkeypatch, capsys):
    responses = [None, MenuSignal.EXIT]

    monkeypatch.setattr(
        main.helpers, "display_menu", lambda *args, **kwargs: responses.pop(0)
    )

    with pytest.raises(SystemExit) as exc_info:
        main.run_cli(sample_store)

    assert exc_info.value.code == 0
    assert responses == []
    assert "Unexpected menu response: None. Please try again." in capsys.readouterr().out
