# models/student.py

"""
Represents a single student record held by the `StudentStore`.

Stores the five fixed fields of a record: a positive integer ID, name, age, letter grade, and department.

Includes functionality for:
- Validating and normalizing ID, age, and grade input
- Building records from and flattening them to plain dictionaries
- Mutating individual fields via property access

The ID is read-only once the record exists. The grade setter validates and normalizes its input,
but the constructor stores values as given so that the store can reject an invalid candidate
with a structured response instead of an exception at construction time.
"""

from __future__ import annotations

ALLOWED_GRADES: tuple[str, ...] = ("A+", "A", "B+", "B", "C", "D", "E", "F")

SAMPLE_STUDENTS: tuple[dict, ...] = (
    {"id": 1, "name": "Alice", "age": 20, "grade": "A", "department": "Computer Science"},
    {"id": 2, "name": "Bob", "age": 22, "grade": "B", "department": "Electronics"},
    {"id": 3, "name": "Charlie", "age": 21, "grade": "A", "department": "Mechanical"},
)


class Student:

    def __init__(
        self,
        id: int,
        name: str,
        age: int,
        grade: str,
        department: str,
    ):
        self._id: int = id
        self._name: str = name
        self._age: int = age
        self._grade: str = grade
        self._department: str = department

    # === properties ===

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, age: int | str) -> None:
        self._age = Student.validate_age_input(age)

    @property
    def grade(self) -> str:
        return self._grade

    @grade.setter
    def grade(self, grade: str) -> None:
        self._grade = Student.validate_grade_input(grade)

    @property
    def department(self) -> str:
        return self._department

    @department.setter
    def department(self, department: str) -> None:
        self._department = department

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "age": self._age,
            "grade": self._grade,
            "department": self._department,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            id=data["id"],
            name=data["name"],
            age=data["age"],
            grade=data["grade"],
            department=data["department"],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._age}, {self._grade}, {self._department})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._id})"

    # === data validators ===

    @staticmethod
    def validate_id_input(id: int | str) -> int:
        """
        Validates and normalizes a Student ID.

        Accepts an integer or a string holding a whole number (surrounding whitespace is ignored).

        Args:
            id: The raw ID value.

        Returns:
            The ID as an int.

        Raises:
            ValueError: If the ID is not a whole number or is not greater than zero.
        """
        try:
            id = Student._parse_whole_number(id)

        except (TypeError, ValueError):
            raise ValueError("Please enter a valid positive number for the ID.")

        if id <= 0:
            raise ValueError("Please enter a valid positive number for the ID.")

        return id

    @staticmethod
    def validate_age_input(age: int | str) -> int:
        """
        Validates and normalizes a Student age.

        No range is enforced, but the age must be a whole number; fractional input such as "20.5" is rejected.

        Raises:
            ValueError: If the age is not a whole number.
        """
        try:
            return Student._parse_whole_number(age)

        except (TypeError, ValueError):
            raise ValueError("Please enter a whole number for the age.")

    @staticmethod
    def validate_grade_input(grade: str) -> str:
        """
        Validates and normalizes a Student grade.

        Normalizes the input by stripping whitespace and converting to uppercase, then
        checks membership in `ALLOWED_GRADES`.

        Args:
            grade: The input grade string to validate.

        Returns:
            The normalized grade if valid.

        Raises:
            ValueError: If the normalized grade is not an allowed grade.
        """
        normalized = str(grade).strip().upper()

        if normalized not in ALLOWED_GRADES:
            raise ValueError(
                f"Kindly enter a valid grade (Allowed: {', '.join(ALLOWED_GRADES)})."
            )

        return normalized

    @staticmethod
    def _parse_whole_number(value: int | str) -> int:
        # bool is an int subclass, but True is not an age or an ID
        if isinstance(value, bool):
            raise TypeError(f"Expected a whole number, got {value!r}.")

        if isinstance(value, int):
            return value

        return int(str(value).strip())


class StudentPatch:
    """
    A partial update for a `Student`.

    Every field is optional; a field left as None is absent from the patch and the stored value is kept.
    The ID is deliberately not part of a patch.
    """

    def __init__(
        self,
        name: str | None = None,
        age: int | str | None = None,
        grade: str | None = None,
        department: str | None = None,
    ):
        self.name = name
        self.age = age
        self.grade = grade
        self.department = department

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.age, self.grade, self.department)
        )

    def __repr__(self) -> str:
        return f"StudentPatch({self.name}, {self.age}, {self.grade}, {self.department})"
