import logging
from dataclasses import replace
from typing import Any, Dict, FrozenSet, List, Sequence, TypeVar, Union

from gpacalc.core.gpa import CourseRow, SemesterRow, parse_number


logger = logging.getLogger(__name__)

MAX_SEMESTER_GPA = 4.0

Row = TypeVar("Row", CourseRow, SemesterRow)

NUMERIC_FIELDS: Dict[type, FrozenSet[str]] = {
    CourseRow: frozenset({"credit", "marks"}),
    SemesterRow: frozenset({"gpa", "credit"}),
}
TEXT_FIELDS: Dict[type, FrozenSet[str]] = {
    CourseRow: frozenset({"title"}),
    SemesterRow: frozenset(),
}


class RowValidationError(ValueError):
    def __init__(self, problems: List[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


def _blocks_whole_credit(value: Any) -> bool:
    if isinstance(value, str):
        return "." in value or "-" in value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return not float(value).is_integer()
    return False


def apply_edit(row: Row, field: str, value: Union[str, int, float]) -> Row:
    row_type = type(row)
    numeric = NUMERIC_FIELDS.get(row_type, frozenset())
    text = TEXT_FIELDS.get(row_type, frozenset())

    if field in text:
        return replace(row, **{field: value})
    if field not in numeric:
        raise ValueError(f"Unsupported field for {row_type.__name__}: {field}")

    # Semester credits are whole numbers: '.' and '-' never reach the value.
    if row_type is SemesterRow and field == "credit" and _blocks_whole_credit(value):
        logger.debug("Rejected semester credit edit %r", value)
        return row

    number = parse_number(value)
    if number is not None and number < 0:
        logger.debug("Rejected negative %s edit %r", field, value)
        return row

    return replace(row, **{field: value})


def _is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def validate_courses(rows: Sequence[CourseRow]) -> List[str]:
    if not rows:
        return ["Add at least one course."]

    problems: List[str] = []
    for index, row in enumerate(rows, start=1):
        if _is_blank(row.title):
            problems.append(f"Course {index}: title is required.")
        for field in ("credit", "marks"):
            value = getattr(row, field)
            if _is_blank(value):
                problems.append(f"Course {index}: {field} is required.")
            elif parse_number(value) is None:
                problems.append(f"Course {index}: {field} must be a number.")
    return problems


def validate_semesters(rows: Sequence[SemesterRow]) -> List[str]:
    if not rows:
        return ["Add at least one semester."]

    problems: List[str] = []
    for index, row in enumerate(rows, start=1):
        label = f"Sem {index}"

        gpa = parse_number(row.gpa)
        if _is_blank(row.gpa):
            problems.append(f"{label}: GPA is required.")
        elif gpa is None:
            problems.append(f"{label}: GPA must be a number.")
        elif not 0 <= gpa <= MAX_SEMESTER_GPA:
            problems.append(f"{label}: GPA must be between 0 and {MAX_SEMESTER_GPA:g}.")

        credit = parse_number(row.credit)
        if _is_blank(row.credit):
            problems.append(f"{label}: credits are required.")
        elif credit is None:
            problems.append(f"{label}: credits must be a number.")
        elif credit < 1 or not credit.is_integer():
            problems.append(f"{label}: credits must be a whole number of at least 1.")
    return problems


def validate_stored_semesters(rows: Sequence[SemesterRow]) -> List[str]:
    """
    Rows written wholesale (not typed one edit at a time) must still be values
    that apply_edit would have let into an empty row.
    """
    problems: List[str] = []
    for index, row in enumerate(rows, start=1):
        for field in ("gpa", "credit"):
            value = getattr(row, field)
            if getattr(apply_edit(SemesterRow(), field, value), field) != value:
                problems.append(f"Sem {index}: {value!r} is not a valid {field}.")
    return problems


def ensure_valid_courses(rows: Sequence[CourseRow]) -> None:
    problems = validate_courses(rows)
    if problems:
        raise RowValidationError(problems)


def ensure_valid_semesters(rows: Sequence[SemesterRow]) -> None:
    problems = validate_semesters(rows)
    if problems:
        raise RowValidationError(problems)


def ensure_storable_semesters(rows: Sequence[SemesterRow]) -> None:
    problems = validate_stored_semesters(rows)
    if problems:
        raise RowValidationError(problems)
