from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from gpacalc.core.gpa import CgpaResult, CourseRow, GpaResult, SemesterRow


class View(Enum):
    HOME = 1
    SCHEME = 2
    GPA_INPUT = 3
    GPA_RESULT = 4
    CGPA = 5


@dataclass
class AppState:
    view: View = View.HOME
    courses: List[CourseRow] = field(default_factory=list)
    gpa_result: Optional[GpaResult] = None
    semesters: List[SemesterRow] = field(default_factory=list)
    cgpa_result: Optional[CgpaResult] = None
