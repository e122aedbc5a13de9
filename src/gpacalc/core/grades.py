from dataclasses import dataclass
from typing import Iterable, List, Tuple


MIN_MARKS = 0
MAX_MARKS = 100


@dataclass(frozen=True)
class GradeBand:
    min: float
    max: float
    grade: str
    point: float


GRADING_SCHEME: Tuple[GradeBand, ...] = (
    GradeBand(85, 100, "A", 4),
    GradeBand(80, 84, "A-", 3.67),
    GradeBand(75, 79, "B+", 3.33),
    GradeBand(71, 74, "B", 3),
    GradeBand(68, 70, "B-", 2.67),
    GradeBand(64, 67, "C+", 2.33),
    GradeBand(60, 63, "C", 2),
    GradeBand(57, 59, "C-", 1.67),
    GradeBand(53, 56, "D+", 1.33),
    GradeBand(50, 52, "D", 1),
    GradeBand(0, 49, "F", 0),
)

FAILING_GRADE = GradeBand(MIN_MARKS, MAX_MARKS, "F", 0)


def resolve_grade(marks: float) -> GradeBand:
    """
    Return the band for a mark, scanning GRADING_SCHEME in order.

    Band bounds are whole marks, so a band covers [min, max + 1). A mark of
    84.5 lands in A- rather than dropping between A and A-. Marks outside
    [0, 100] get FAILING_GRADE.
    """
    if not MIN_MARKS <= marks <= MAX_MARKS:
        return FAILING_GRADE

    for band in GRADING_SCHEME:
        if band.min <= marks < band.max + 1:
            return band

    return FAILING_GRADE


def find_scheme_gaps(bands: Iterable[GradeBand] = GRADING_SCHEME) -> List[Tuple[int, int]]:
    """
    bands: iterable of GradeBand
    Returns the runs of whole marks in [0, 100] that no band covers, as
    inclusive (start, end) pairs. An empty list means the table tiles the range.
    """
    covered = set()
    for band in bands:
        covered.update(range(int(band.min), int(band.max) + 1))

    gaps: List[Tuple[int, int]] = []
    start = None
    for mark in range(MIN_MARKS, MAX_MARKS + 1):
        if mark in covered:
            if start is not None:
                gaps.append((start, mark - 1))
                start = None
        elif start is None:
            start = mark

    if start is not None:
        gaps.append((start, MAX_MARKS))

    return gaps
