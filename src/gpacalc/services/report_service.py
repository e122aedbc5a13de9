import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from fpdf import FPDF

from gpacalc.config.settings import settings
from gpacalc.core.gpa import CgpaResult, GpaResult


logger = logging.getLogger(__name__)

REPORT_TITLE = "Academic Report"
FILE_EXTENSION = "pdf"

# Page geometry in millimetres on A4.
MARGIN_X = 20
TITLE_Y = 20
BODY_TOP_Y = 40
LINE_SPACING = 10
TITLE_FONT_SIZE = 20
BODY_FONT_SIZE = 12
FONT_FAMILY = "Helvetica"


def format_number(value: Union[int, float]) -> str:
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _latin1(line: str) -> str:
    # Core PDF fonts only carry Latin-1 glyphs.
    return line.encode("latin-1", "replace").decode("latin-1")


@dataclass
class ReportDocument:
    kind: str
    pages: List[List[str]] = field(default_factory=list)

    @property
    def filename(self) -> str:
        return f"{self.kind}_Result.{FILE_EXTENSION}"

    def render(self) -> bytes:
        """
        Each page: title at TITLE_Y in the large font, then the body lines
        LINE_SPACING apart from BODY_TOP_Y. Blank body lines leave an empty slot.
        """
        pdf = FPDF(unit="mm", format="A4")
        pdf.set_auto_page_break(auto=False)
        for page in self.pages:
            title, body = page[0], page[2:]
            pdf.add_page()
            pdf.set_font(FONT_FAMILY, size=TITLE_FONT_SIZE)
            pdf.text(MARGIN_X, TITLE_Y, _latin1(title))
            pdf.set_font(FONT_FAMILY, size=BODY_FONT_SIZE)
            for offset, line in enumerate(body):
                if line:
                    pdf.text(MARGIN_X, BODY_TOP_Y + offset * LINE_SPACING, _latin1(line))
        return bytes(pdf.output())


def _paginate(kind: str, body: List[str], lines_per_page: int) -> ReportDocument:
    """
    Title plus blank line head every page; body lines fill the rest of the budget.
    """
    header = [REPORT_TITLE, ""]
    room = max(1, lines_per_page - len(header))

    pages = [header + body[start:start + room] for start in range(0, len(body), room)]
    return ReportDocument(kind=kind, pages=pages or [list(header)])


def build_gpa_report(result: GpaResult, lines_per_page: int = settings.report_lines_per_page) -> ReportDocument:
    body = [
        f"Session GPA: {result.gpa:.2f}",
        f"Total Credits: {format_number(result.total_credit)}",
        "",
        "Course Breakdown:",
    ]
    for course in result.processed:
        body.append(f"{course.index}. {course.title} - Grade: {course.grade} ({format_number(course.marks)})")
    return _paginate("GPA", body, lines_per_page)


def build_cgpa_report(result: CgpaResult, lines_per_page: int = settings.report_lines_per_page) -> ReportDocument:
    body = [
        f"Cumulative GPA (CGPA): {result.cgpa:.2f}",
        f"Total Semesters: {result.semester_count}",
        f"Total Credits: {format_number(result.total_credits)}",
    ]
    return _paginate("CGPA", body, lines_per_page)


def save_report(document: ReportDocument, directory: Union[str, Path] = settings.export_dir) -> Path:
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / document.filename
    path.write_bytes(document.render())
    logger.info("Saved %s report (%d page(s)) to %s", document.kind, len(document.pages), path)
    return path
