# cli/model_formatters.py

# anything that renders Student records for the console
from textwrap import dedent

import core.formatters as formatters
from models.student import Student

STUDENT_TABLE_HEADERS = ("ID", "Name", "Age", "Grade", "Department")

# === student formatters ===


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Student {student.id}:
        ... Name: {student.name}
        ... Age: {student.age}
        ... Grade: {student.grade}
        ... Department: {student.department}"""
    )


def format_students_table(students: list[Student]) -> str:
    rows = [
        (s.id, s.name, s.age, s.grade, s.department)
        for s in students
    ]

    return formatters.format_table(STUDENT_TABLE_HEADERS, rows)
