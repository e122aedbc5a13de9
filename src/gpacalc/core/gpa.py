import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from gpacalc.core.grades import resolve_grade


RawNumber = Union[str, int, float]


def parse_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def number_or_zero(value: Any) -> float:
    number = parse_number(value)
    return 0.0 if number is None else number


@dataclass
class CourseRow:
    title: str = ""
    credit: RawNumber = ""
    marks: RawNumber = ""


@dataclass
class SemesterRow:
    gpa: RawNumber = ""
    credit: RawNumber = ""

    def to_dict(self) -> Dict[str, RawNumber]:
        return {"gpa": self.gpa, "credit": self.credit}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SemesterRow":
        return cls(gpa=data.get("gpa", ""), credit=data.get("credit", ""))


@dataclass(frozen=True)
class ProcessedCourse:
    title: str
    credit: float
    marks: float
    grade: str
    point: float
    weighted_point: float
    index: int


@dataclass(frozen=True)
class GpaResult:
    processed: Tuple[ProcessedCourse, ...]
    total_credit: float
    total_weighted_point: float
    gpa: float


@dataclass(frozen=True)
class CgpaResult:
    cgpa: float
    total_credits: float
    semester_count: int


def compute_gpa(rows: Iterable[CourseRow]) -> GpaResult:
    """
    GPA = Σ(credit * grade_point) / Σ(credit)
    Unparsable credit or marks count as 0; zero total credit gives a GPA of 0.
    """
    processed = []
    total_credit = 0.0
    total_weighted = 0.0

    for index, row in enumerate(rows, start=1):
        credit = number_or_zero(row.credit)
        marks = number_or_zero(row.marks)
        band = resolve_grade(marks)
        weighted_point = credit * band.point
        processed.append(
            ProcessedCourse(
                title=row.title,
                credit=credit,
                marks=marks,
                grade=band.grade,
                point=band.point,
                weighted_point=weighted_point,
                index=index,
            )
        )
        total_credit += credit
        total_weighted += weighted_point

    gpa = total_weighted / total_credit if total_credit > 0 else 0.0
    return GpaResult(
        processed=tuple(processed),
        total_credit=total_credit,
        total_weighted_point=total_weighted,
        gpa=gpa,
    )


def compute_cgpa(rows: Iterable[SemesterRow]) -> CgpaResult:
    """
    CGPA = Σ(gpa * semester_credits) / Σ(semester_credits)
    """
    weighted_sum = 0.0
    total_credits = 0.0
    count = 0

    for row in rows:
        gpa = number_or_zero(row.gpa)
        credit = number_or_zero(row.credit)
        weighted_sum += gpa * credit
        total_credits += credit
        count += 1

    cgpa = weighted_sum / total_credits if total_credits > 0 else 0.0
    return CgpaResult(cgpa=cgpa, total_credits=total_credits, semester_count=count)
