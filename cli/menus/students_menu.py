# cli/menus/students_menu.py

"""
Student actions for the Student Records CLI.

This module defines the interface for each action on the main menu:
- Viewing all students
- Adding new students
- Updating student fields
- Removing students
- Searching students by name
- Filtering students by grade, department, or age

Every operation is routed through the `StudentStore` API, which owns validation and mutation.
Inputs are validated at the prompt with the same validators the store applies, so invalid values
are re-asked locally and the store's own checks act as a second line of defense.
A failed store operation is reported and the action ends; it never ends the session.
"""

from typing import Any

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
from cli.menu_helpers import FieldKind, FieldSpec
from models.student import Student, StudentPatch
from models.student_store import FilterCriterion, StudentStore

# === view students ===


def view_all_students(store: StudentStore) -> None:
    helpers.display_students(store.students)


# === add student ===


def add_student(store: StudentStore) -> None:
    """
    Prompts for a new `Student` and adds it to the store.

    Args:
        store (StudentStore): The active `StudentStore`.

    Notes:
        - The ID is checked for format and uniqueness at the prompt; the grade is normalized (trimmed, uppercase).
        - On success the full list is shown again.
    """
    answers = helpers.prompt_fields(get_new_student_fields(store))

    new_student = Student(
        id=answers["id"],
        name=answers["name"],
        age=answers["age"],
        grade=answers["grade"],
        department=answers["department"],
    )

    store_response = store.add_student(new_student)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        print(f"\n{new_student.name} was not added.")
        return

    print(f"\n{store_response.detail}")
    helpers.display_students(store.students)


def get_new_student_fields(store: StudentStore) -> list[FieldSpec]:
    def validate_new_id(id: Any) -> int:
        id = Student.validate_id_input(id)
        store.require_unique_student_id(id)
        return id

    return [
        FieldSpec("id", "Enter student ID:", FieldKind.NUMBER, validate=validate_new_id),
        FieldSpec("name", "Enter student name:"),
        FieldSpec(
            "age",
            "Enter student age:",
            FieldKind.NUMBER,
            validate=Student.validate_age_input,
        ),
        FieldSpec(
            "grade",
            "Enter student grade:",
            validate=Student.validate_grade_input,
        ),
        FieldSpec("department", "Enter student department:"),
    ]


# === update student ===


def update_student(store: StudentStore) -> None:
    """
    Prompts for a student ID, then for new values of each editable field, and applies the changes.

    Args:
        store (StudentStore): The active `StudentStore`.

    Notes:
        - Each field prompt defaults to the current value; leaving it blank keeps that value.
        - Only fields whose value actually changed are sent to the store.
    """
    if len(store) == 0:
        print("\nNo students to update!")
        return

    helpers.display_students(store.students)

    student = prompt_existing_student(store, "Enter ID of student to update:")

    if student is None:
        return

    answers = helpers.prompt_fields(get_editable_fields(student))
    patch = build_patch(student, answers)

    if patch.is_empty():
        helpers.returning_without_changes()
        return

    store_response = store.update_student(student.id, patch)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    print(f"\n{store_response.detail}")
    helpers.display_students(store.students)


def get_editable_fields(student: Student) -> list[FieldSpec]:
    return [
        FieldSpec("name", "New name:", default=student.name),
        FieldSpec(
            "age",
            "New age:",
            FieldKind.NUMBER,
            default=student.age,
            validate=Student.validate_age_input,
        ),
        FieldSpec(
            "grade",
            "New grade:",
            default=student.grade,
            validate=Student.validate_grade_input,
        ),
        FieldSpec("department", "New department:", default=student.department),
    ]


def build_patch(student: Student, answers: dict[str, Any]) -> StudentPatch:
    patch = StudentPatch()

    if answers["name"] != student.name:
        patch.name = answers["name"]

    if answers["age"] != student.age:
        patch.age = answers["age"]

    if answers["grade"] != student.grade:
        patch.grade = answers["grade"]

    if answers["department"] != student.department:
        patch.department = answers["department"]

    return patch


# === delete student ===


def delete_student(store: StudentStore) -> None:
    """
    Prompts for a student ID, previews the record, and removes it after confirmation.

    Args:
        store (StudentStore): The active `StudentStore`.
    """
    if len(store) == 0:
        print("\nNo students to delete!")
        return

    helpers.display_students(store.students)

    student = prompt_existing_student(store, "Enter ID of student to delete:")

    if student is None:
        return

    print("\nYou are about to delete the following student:")
    print(model_formatters.format_student_multiline(student))

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return

    store_response = store.remove_student_by_id(student.id)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    print(f"\n{store_response.detail}")
    helpers.display_students(store.students)


# === search and filter ===


def search_students(store: StudentStore) -> None:
    """
    Prompts for part of a name and shows every student whose name contains it, ignoring case.

    Notes:
        - A blank search matches every student.
    """
    query = helpers.prompt_user_input("Enter name to search:")

    store_response = store.find_students_by_name(query)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    helpers.display_students(
        store_response.data["records"], f'Search Results for "{query}":'
    )


def filter_students(store: StudentStore) -> None:
    """
    Prompts for a filter criterion and a value, and shows the students that match exactly.

    Notes:
        - Grade and department are compared ignoring case; age must be a whole number.
        - A non-numeric age is reported and nothing is shown.
    """
    answers = helpers.prompt_fields(
        [
            FieldSpec(
                "criterion",
                "Select filter criterion:",
                FieldKind.CHOICE,
                choices=[criterion.value for criterion in FilterCriterion],
            ),
            FieldSpec("value", "Enter value to filter by:"),
        ]
    )
    criterion, value = answers["criterion"], answers["value"]

    store_response = store.filter_students(criterion, value)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    helpers.display_students(
        store_response.data["records"], f"Filtered Students ({criterion}: {value}):"
    )


# === data input helpers ===


def prompt_existing_student(store: StudentStore, message: str) -> Student | None:
    """
    Solicits a student ID and looks it up in the store.

    Args:
        store (StudentStore): The active `StudentStore`.
        message (str): The prompt shown to the user.

    Returns:
        The matching `Student`, or None if no student has that ID (the failure is reported).
    """
    id = helpers.prompt_field(
        FieldSpec("id", message, FieldKind.NUMBER, validate=Student.validate_id_input)
    )

    store_response = store.find_student_by_id(id)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return None

    return store_response.data["record"]
