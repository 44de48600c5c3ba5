# models/student_store.py

"""
The StudentStore is the central data object of the program and the "source of truth" for all student records.

Records are held in memory only, in a dictionary keyed by student ID. Dictionary insertion order is the
display and iteration order: new records are appended at the end, and removing a record keeps the
remaining records in place.

Provides functions for adding, updating, removing, and finding `Student` records, searching by name,
filtering by grade, department, or age, and verifying ID uniqueness before adding.
Every public manipulator and lookup returns a structured `Response` and never raises.
"""

from __future__ import annotations

import traceback
from enum import Enum
from typing import Callable

import core.formatters as formatters
from core.response import ErrorCode, Response
from models.student import SAMPLE_STUDENTS, Student, StudentPatch


class FilterCriterion(str, Enum):
    GRADE = "grade"
    DEPARTMENT = "department"
    AGE = "age"


class StudentStore:

    def __init__(self, seed_sample_data: bool = True):
        self._students: dict[int, Student] = {}

        if seed_sample_data:
            for data in SAMPLE_STUDENTS:
                student = Student.from_dict(data)
                self._students[student.id] = student

    # === properties ===

    @property
    def students(self) -> list[Student]:
        return list(self._students.values())

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, id: object) -> bool:
        return id in self._students

    def __repr__(self) -> str:
        return f"StudentStore({len(self._students)} students)"

    # === data accessors ===

    def get_records(
        self,
        predicate: Callable[[Student], bool] | None = None,
    ) -> Response:
        """
        Fetches all records in insertion order, optionally filtered by a predicate.

        Args:
            predicate (Callable[[Student], bool]): Optional filter function. If omitted, all records are returned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the operation succeeded, even if no records were found.
                    - False for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): The list of matching records (may be empty).
                    - On failure:
                        - None

        Notes:
            - This method is read-only and never raises exceptions.
            - The "records" key is always included on success, even if the result is empty.
        """
        try:
            if predicate:
                records = [s for s in self._students.values() if predicate(s)]
            else:
                records = list(self._students.values())

        except Exception as e:
            return self._unexpected_error(e)

        else:
            return Response.succeed(
                data={
                    "records": records,
                }
            )

    def find_student_by_id(self, id: int | str) -> Response:
        """
        Finds a `Student` object by ID.

        Args:
            id (int | str): The unique ID of the `Student`, as an int or a numeric string.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was found.
                    - False if the ID is malformed or no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the ID is not a positive whole number.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                    - 400 if the ID is malformed
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The stored `Student` object itself, not a copy.

        Notes:
            - This method is read-only and does not raise.
            - Callers may mutate the returned record, but should prefer `update_student()` so that field validation applies.
        """
        try:
            id = Student.validate_id_input(id)

        except ValueError as e:
            return self._invalid_id(e)

        student = self._students.get(id)

        if student is None:
            return Response.fail(
                detail=f"No student found with ID {id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": student,
            },
        )

    def find_students_by_name(self, query: str) -> Response:
        """
        Generates a list of `Student` objects whose name contains the search query.

        Args:
            query (str): A search key to compare against student names.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True, an empty result is not a failure.
                - data (dict): Payload with the following keys:
                    - "records" (list[Student]): Matching students in insertion order (may be empty).

        Notes:
            - This method is read-only and does not raise.
            - The search query is normalized (leading and trailing whitespace stripped and case-folded) before searching.
            - An empty query is a substring of every name, so it matches every record.
        """
        query = self._normalize(query)

        matching_students = [
            student
            for student in self._students.values()
            if query in self._normalize(student.name)
        ]

        return Response.succeed(
            data={
                "records": matching_students,
            },
        )

    def filter_students(
        self, criterion: FilterCriterion | str, raw_value: str
    ) -> Response:
        """
        Generates a list of `Student` objects whose grade, department, or age equals the given value.

        Args:
            criterion (FilterCriterion | str): The field to compare, either the enum member or its value.
            raw_value (str): The value to compare against, as typed by the user.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the comparison could be made, even if nothing matched.
                    - False if the criterion is unknown or an age value is not a whole number.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_INPUT` if the criterion is unknown.
                    - `ErrorCode.MALFORMED_FILTER_INPUT` if the age value is not a whole number.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict): Payload with the following keys:
                    - "records" (list[Student]): Matching students in insertion order. Empty on failure.

        Notes:
            - This method is read-only and does not raise.
            - Age is compared as an integer, exactly.
            - Grade and department are compared as trimmed, case-folded text, exactly (not a substring match).
        """
        try:
            criterion = FilterCriterion(criterion)

        except ValueError:
            allowed = formatters.format_list_with_and([c.value for c in FilterCriterion])
            return Response.fail(
                detail=f"Unknown filter criterion '{criterion}'. Choose {allowed}.",
                error=ErrorCode.INVALID_INPUT,
                data={"records": []},
            )

        if criterion is FilterCriterion.AGE:
            try:
                age = Student.validate_age_input(raw_value)

            except ValueError:
                return Response.fail(
                    detail="Please enter a valid number for age filtering.",
                    error=ErrorCode.MALFORMED_FILTER_INPUT,
                    data={"records": []},
                )

            return self.get_records(lambda s: s.age == age)

        value = self._normalize(raw_value)

        if criterion is FilterCriterion.GRADE:
            return self.get_records(lambda s: self._normalize(s.grade) == value)

        return self.get_records(lambda s: self._normalize(s.department) == value)

    # === data manipulators ===

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` object to the end of the store.

        Args:
            student (Student): The candidate record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Student` was successfully added.
                    - False if the ID, age, or grade is invalid, the ID is already taken, or unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FIELD_VALUE` if the ID is not a positive whole number, the age is not a whole number, or the grade is not allowed.
                    - `ErrorCode.DUPLICATE_ID` if another student already has this ID.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added `Student` object.

        Notes:
            - The store is not mutated unless every check passes.
            - On success the stored ID and age are ints and the stored grade is the normalized (trimmed, uppercase) form.
        """
        try:
            id = Student.validate_id_input(student.id)
            age = Student.validate_age_input(student.age)
            grade = Student.validate_grade_input(student.grade)

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid student: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            self.require_unique_student_id(id)

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_ID,
            )

        try:
            student._id = id
            student.age = age
            student.grade = grade
            self._students[id] = student

        except Exception as e:
            return self._unexpected_error(e)

        else:
            return Response.succeed(
                detail="Student added successfully!",
                data={
                    "record": student,
                },
            )

    def update_student(self, id: int | str, patch: StudentPatch) -> Response:
        """
        Overwrites the fields of a stored `Student` that are present in the patch.

        Args:
            id (int): The ID of the student to update.
            patch (StudentPatch): The new field values. Fields left as None keep their current value.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was found and every supplied value was valid (an empty patch is a no-op success).
                    - False otherwise.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has this ID.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the ID is malformed or a supplied grade or age is invalid.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no student has this ID
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The updated `Student` object.

        Notes:
            - All supplied values are validated before any field is written, so a failed update leaves the record unchanged.
            - The record is updated in place; its ID and identity never change.
        """
        find_response = self.find_student_by_id(id)

        if not find_response.success:
            return find_response

        student = find_response.data["record"]

        try:
            grade = (
                Student.validate_grade_input(patch.grade)
                if patch.grade is not None
                else None
            )
            age = (
                Student.validate_age_input(patch.age) if patch.age is not None else None
            )

        except ValueError as e:
            return Response.fail(
                detail=f"Invalid update: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            if patch.name is not None:
                student.name = patch.name

            if age is not None:
                student.age = age

            if grade is not None:
                student.grade = grade

            if patch.department is not None:
                student.department = patch.department

        except Exception as e:
            return self._unexpected_error(e)

        else:
            return Response.succeed(
                detail="Student updated successfully!",
                data={
                    "record": student,
                },
            )

    def remove_student_by_id(self, id: int | str) -> Response:
        """
        Removes the `Student` with the given ID from the store.

        Args:
            id (int | str): The ID of the student to remove, as an int or a numeric string.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed.
                    - False if the ID is malformed or no student has this ID.
                - detail (str | None):
                    - A human-readable confirmation or description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no student has this ID.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the ID is not a positive whole number.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no student has this ID
                    - 400 if the ID is malformed
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed `Student` object.

        Notes:
            - The order of the remaining records is preserved.
            - Once removed, the ID may be used again by a new student.
        """
        try:
            id = Student.validate_id_input(id)

        except ValueError as e:
            return self._invalid_id(e)

        try:
            student = self._students.pop(id)

        except KeyError:
            return Response.fail(
                detail=f"No student found with ID {id}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            detail="Student deleted successfully!",
            data={
                "record": student,
            },
        )

    # === data validators ===

    def require_unique_student_id(self, id: int) -> None:
        """
        Validates that no existing student has the given ID.

        Raises:
            ValueError: If a student with the same ID already exists.
        """
        if id in self._students:
            raise ValueError(f"A student with the ID {id} already exists.")

    # === helpers ===

    @staticmethod
    def _normalize(value: object) -> str:
        return str(value).strip().casefold()

    @staticmethod
    def _invalid_id(e: ValueError) -> Response:
        return Response.fail(
            detail=f"Invalid student ID: {e}",
            error=ErrorCode.INVALID_FIELD_VALUE,
        )

    @staticmethod
    def _unexpected_error(e: Exception) -> Response:
        return Response.fail(
            detail=f"Unexpected error: {e}",
            error=ErrorCode.INTERNAL_ERROR,
            trace=traceback.format_exc(),
        )
