# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and student tables
- Prompting for and validating user input, one field or a whole form at a time
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
from core.response import Response
from models.student import Student


class MenuSignal(Enum):
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


class FieldKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    CHOICE = "choice"


class FieldSpec:
    """
    Describes one answer to collect with `prompt_fields()`.

    Attributes:
        name (str): The key under which the accepted value is returned.
        message (str): The prompt shown to the user.
        kind (FieldKind): Free text, whole number, or a single choice from `choices`.
        default (Any): Used when the user enters nothing. Still validated. None means no default.
        choices (list[str] | None): The options for a `FieldKind.CHOICE` field.
        validate (Callable[[Any], Any] | None): Returns the accepted value or raises `ValueError` with the rejection reason.
        normalize (Callable[[Any], Any] | None): Applied to the value after it is accepted.
    """

    def __init__(
        self,
        name: str,
        message: str,
        kind: FieldKind = FieldKind.TEXT,
        default: Any = None,
        choices: list[str] | None = None,
        validate: Callable[[Any], Any] | None = None,
        normalize: Callable[[Any], Any] | None = None,
    ):
        if kind is FieldKind.CHOICE and not choices:
            raise ValueError(f"Choice field '{name}' requires at least one choice.")

        self.name = name
        self.message = message
        self.kind = kind
        self.default = default
        self.choices = choices or []
        self.validate = validate
        self.normalize = normalize


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_students(
    students: Iterable[Student], heading: str = "Current Students List:"
) -> None:
    """
    Prints a heading followed by a table of students, or a notice if there are none.

    Args:
        students (Iterable[Student]): The records to display, in display order.
        heading (str, optional): A line printed above the table.

    Notes:
        - Records are shown in the order given; nothing is sorted here.
        - An empty sequence prints "No students found!" instead of an empty table.
    """
    students = list(students)

    print(f"\n{heading}")

    if not students:
        print("No students found!")
        return

    print(model_formatters.format_students_table(students))


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
# - `confirm_action()` and its variants loop until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


# === form prompts ===


def prompt_fields(fields: list[FieldSpec]) -> dict[str, Any]:
    """
    Prompts for each field in order and returns the accepted answers.

    Args:
        fields (list[FieldSpec]): The fields to collect.

    Returns:
        dict[str, Any]: A mapping of field name to accepted, normalized value.

    Notes:
        - Each field is re-prompted until its value is accepted; there is no way to cancel a form.
    """
    return {field.name: prompt_field(field) for field in fields}


def prompt_field(field: FieldSpec) -> Any:
    """
    Prompts for a single field until the input is accepted.

    Args:
        field (FieldSpec): The field to collect.

    Returns:
        The accepted value, after `field.normalize` if one is set.

    Notes:
        - Blank input falls back to `field.default` when one is set; otherwise the blank string is validated as-is.
        - `FieldKind.NUMBER` input must be a whole number; `FieldKind.CHOICE` input may be an index or a label.
        - Rejections print the reason and ask again.
    """
    prompt = field.message

    if field.default is not None:
        prompt = f"{prompt} (leave blank to keep '{field.default}')"

    while True:
        if field.kind is FieldKind.CHOICE:
            print(f"\n{field.message}")
            display_results(field.choices, show_index=True)
            response = prompt_user_input_or_default("Select an option:")

        else:
            response = prompt_user_input_or_default(prompt)

        value = field.default if response is MenuSignal.DEFAULT else response

        if value is None:
            value = ""

        try:
            value = _coerce_field_value(field, value)

            if field.validate is not None:
                value = field.validate(value)

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            print("Please try again.")
            continue

        return field.normalize(value) if field.normalize is not None else value


def _coerce_field_value(field: FieldSpec, value: Any) -> Any:
    if field.kind is FieldKind.NUMBER:
        if isinstance(value, int) and not isinstance(value, bool):
            return value

        try:
            return int(str(value).strip())

        except ValueError:
            raise ValueError(f"Please enter a whole number for {field.name}.")

    if field.kind is FieldKind.CHOICE:
        value = str(value).strip()

        if value in field.choices:
            return value

        try:
            index = int(value) - 1

            if index < 0:
                raise IndexError(index)

            return field.choices[index]

        except (ValueError, IndexError):
            raise ValueError("Invalid selection.")

    return value


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
