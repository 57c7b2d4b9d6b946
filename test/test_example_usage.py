"""Boundary values as arguments for a function under test."""

import math

import pytest

from boundgen import generate_data

STUDENT_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string"},
        "grades": {"type": "object", "additionalProperties": {"type": "number"}},
    },
    "required": ["name", "grades"],
}
STUDENTS_SCHEMA = {"type": "array", "items": STUDENT_SCHEMA}
# Positional arguments of `top_students`
ARGUMENTS_SCHEMA = {
    "type": "array",
    "prefixItems": [STUDENTS_SCHEMA, {"type": "number"}, {"type": "array", "items": {"type": "string"}}],
    "minItems": 3,
    "maxItems": 3,
}


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def is_student(value):
    return (
        isinstance(value, dict)
        and isinstance(value.get("name"), str)
        and isinstance(value.get("grades"), dict)
        and all(is_number(grade) for grade in value["grades"].values())
    )


def top_students(students, min_grade, subjects):
    """Students whose average grade over `subjects` is at least `min_grade`."""
    if not isinstance(students, list) or not all(is_student(student) for student in students):
        return []
    if not is_number(min_grade):
        return []
    if not isinstance(subjects, list) or not subjects or not all(isinstance(subject, str) for subject in subjects):
        return []
    result = []
    for student in students:
        total = sum(student["grades"].get(subject, 0) for subject in subjects)
        if total / len(subjects) >= min_grade:
            result.append(student)
    return result


GENERATED = generate_data(ARGUMENTS_SCHEMA)
INVALID_ARGUMENTS = [value for value in GENERATED.invalid if isinstance(value, list) and len(value) == 3]


def test_has_arguments():
    assert GENERATED.valid
    assert INVALID_ARGUMENTS


@pytest.mark.parametrize("arguments", GENERATED.valid)
def test_valid_arguments(oracle, arguments):
    result = top_students(*arguments)
    assert oracle.is_valid(result, STUDENTS_SCHEMA)


@pytest.mark.parametrize("arguments", INVALID_ARGUMENTS)
def test_invalid_arguments(arguments):
    assert top_students(*arguments) == []
