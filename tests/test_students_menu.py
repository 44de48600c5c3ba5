# tests/test_students_menu.py

import cli.menus.students_menu as students_menu
from models.student import Student


def names(store):
    return [s.name for s in store.students]


# --- view ---


def test_view_all_students(sample_store, capsys):
    students_menu.view_all_students(sample_store)

    out = capsys.readouterr().out
    assert "Current Students List:" in out
    assert "Alice" in out and "Bob" in out and "Charlie" in out


def test_view_all_students_when_empty(empty_store, capsys):
    students_menu.view_all_students(empty_store)

    assert "No students found!" in capsys.readouterr().out


# --- add ---


def test_add_student(sample_store, scripted_input, capsys):
    remaining = scripted_input("4", "Dana", "23", " b+ ", "Physics")

    students_menu.add_student(sample_store)

    assert remaining == []
    assert names(sample_store) == ["Alice", "Bob", "Charlie", "Dana"]
    dana = sample_store.find_student_by_id(4).data["record"]
    assert dana.to_dict() == {
        "id": 4,
        "name": "Dana",
        "age": 23,
        "grade": "B+",
        "department": "Physics",
    }
    assert "Student added successfully!" in capsys.readouterr().out


def test_add_student_reprompts_for_bad_id_age_and_grade(
    sample_store, scripted_input, capsys
):
    remaining = scripted_input(
        "2", "-5", "abc", "5", "Eve", "nineteen", "19", "G", "c", "Biology"
    )

    students_menu.add_student(sample_store)

    assert remaining == []
    out = capsys.readouterr().out
    assert "A student with the ID 2 already exists." in out
    assert "Please enter a valid positive number for the ID." in out
    assert "Please enter a whole number for id." in out
    assert "Please enter a whole number for age." in out
    assert "Kindly enter a valid grade" in out
    assert sample_store.find_student_by_id(5).data["record"].grade == "C"
    assert len(sample_store) == 4


# --- update ---


def test_update_student_changes_only_edited_fields(sample_store, scripted_input, capsys):
    remaining = scripted_input("2", "", "23", "a", "")

    students_menu.update_student(sample_store)

    assert remaining == []
    bob = sample_store.find_student_by_id(2).data["record"]
    assert bob.to_dict() == {
        "id": 2,
        "name": "Bob",
        "age": 23,
        "grade": "A",
        "department": "Electronics",
    }
    assert "Student updated successfully!" in capsys.readouterr().out


def test_update_student_without_changes(sample_store, scripted_input, capsys):
    scripted_input("1", "", "", "", "")

    students_menu.update_student(sample_store)

    assert "Returning without changes." in capsys.readouterr().out
    assert sample_store.find_student_by_id(1).data["record"].name == "Alice"


def test_update_unknown_student(sample_store, scripted_input, capsys):
    remaining = scripted_input("99")

    students_menu.update_student(sample_store)

    assert remaining == []
    assert "[ERROR: NOT_FOUND] No student found with ID 99." in capsys.readouterr().out


def test_update_when_empty(empty_store, capsys):
    students_menu.update_student(empty_store)

    assert "No students to update!" in capsys.readouterr().out


def test_build_patch_skips_unchanged_fields():
    student = Student(1, "Alice", 20, "A", "Computer Science")

    patch = students_menu.build_patch(
        student,
        {"name": "Alice", "age": 20, "grade": "B", "department": "Computer Science"},
    )

    assert patch.grade == "B"
    assert patch.name is None
    assert patch.age is None
    assert patch.department is None


# --- delete ---


def test_delete_student_after_confirmation(sample_store, scripted_input, capsys):
    scripted_input("2", "y")

    students_menu.delete_student(sample_store)

    assert names(sample_store) == ["Alice", "Charlie"]
    assert "Student deleted successfully!" in capsys.readouterr().out


def test_delete_student_declined(sample_store, scripted_input, capsys):
    scripted_input("2", "n")

    students_menu.delete_student(sample_store)

    assert names(sample_store) == ["Alice", "Bob", "Charlie"]
    assert "Returning without changes." in capsys.readouterr().out


def test_delete_unknown_student(sample_store, scripted_input, capsys):
    remaining = scripted_input("99")

    students_menu.delete_student(sample_store)

    assert remaining == []
    assert len(sample_store) == 3
    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_delete_when_empty(empty_store, capsys):
    students_menu.delete_student(empty_store)

    assert "No students to delete!" in capsys.readouterr().out


# --- search ---


def test_search_students(sample_store, scripted_input, capsys):
    scripted_input("ali")

    students_menu.search_students(sample_store)

    out = capsys.readouterr().out
    assert 'Search Results for "ali":' in out
    assert "Alice" in out
    assert "Bob" not in out and "Charlie" not in out


def test_search_students_blank_shows_everyone(sample_store, scripted_input, capsys):
    scripted_input("")

    students_menu.search_students(sample_store)

    out = capsys.readouterr().out
    assert "Alice" in out and "Bob" in out and "Charlie" in out


def test_search_students_without_matches(sample_store, scripted_input, capsys):
    scripted_input("zed")

    students_menu.search_students(sample_store)

    assert "No students found!" in capsys.readouterr().out


# --- filter ---


def test_filter_students_by_age(sample_store, scripted_input, capsys):
    scripted_input("3", "22")

    students_menu.filter_students(sample_store)

    out = capsys.readouterr().out
    assert "Filtered Students (age: 22):" in out
    assert "Bob" in out
    assert "Alice" not in out and "Charlie" not in out


def test_filter_students_by_malformed_age(sample_store, scripted_input, capsys):
    scripted_input("age", "xx")

    students_menu.filter_students(sample_store)

    out = capsys.readouterr().out
    assert (
        "[ERROR: MALFORMED_FILTER_INPUT] Please enter a valid number for age filtering."
        in out
    )
    assert "Filtered Students" not in out


def test_filter_students_by_department(sample_store, scripted_input, capsys):
    scripted_input("2", "MECHANICAL")

    students_menu.filter_students(sample_store)

    out = capsys.readouterr().out
    assert "Charlie" in out
    assert "Alice" not in out
