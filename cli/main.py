# cli/main.py

"""
Main Menu for the Student Records CLI.

Builds the in-memory `StudentStore` and runs the top-level action loop.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import students_menu
from models.student_store import StudentStore


def main() -> None:
    """
    Entry point for the `student-records` command.

    Notes:
        - The store is seeded with the sample students and lives until the program exits.
    """
    store = StudentStore()
    run_cli(store)


def run_cli(store: StudentStore) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        store (StudentStore): The active `StudentStore`.

    Raises:
        SystemExit: When the user selects Exit.

    Notes:
        - Each action runs to completion before the menu is shown again.
        - An unrecognized menu response is reported and the menu is shown again.
    """
    title = formatters.format_banner_text("STUDENT RECORDS")
    options = [
        ("View All Students", students_menu.view_all_students),
        ("Add Student", students_menu.add_student),
        ("Update Student", students_menu.update_student),
        ("Delete Student", students_menu.delete_student),
        ("Search Student (by Name)", students_menu.search_students),
        ("Filter Students", students_menu.filter_students),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(store)

        else:
            print(f"\nUnexpected menu response: {menu_response}. Please try again.")


def exit_program() -> None:
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised with status 0 to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Student Records")
    print(f"\n{exit_banner}\nGoodbye!\n")

    raise SystemExit(0)


if __name__ == "__main__":
    main()
