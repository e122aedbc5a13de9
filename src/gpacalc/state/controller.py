import logging
from pathlib import Path
from typing import Optional, Union

from gpacalc.config.settings import settings
from gpacalc.core.gpa import CgpaResult, CourseRow, GpaResult, SemesterRow, compute_cgpa, compute_gpa
from gpacalc.core.validation import apply_edit, ensure_valid_courses, ensure_valid_semesters
from gpacalc.services.report_service import build_cgpa_report, build_gpa_report, save_report
from gpacalc.services.semester_store import SemesterStore, transfer
from gpacalc.state.app_state import AppState, View


logger = logging.getLogger(__name__)


class AppController:
    """All view transitions and row mutations go through here; views only read `state`."""

    def __init__(self, store: SemesterStore) -> None:
        self.store = store
        self.state = AppState(semesters=store.load())

    def _sync_semesters(self) -> None:
        self.state.semesters = self.store.rows

    # Navigation

    def start_gpa(self) -> None:
        self.state.view = View.SCHEME

    def begin_courses(self) -> None:
        self.state.view = View.GPA_INPUT

    def open_cgpa(self) -> None:
        self.state.view = View.CGPA

    def go_home(self) -> None:
        if self.state.view is View.GPA_RESULT:
            self.state.courses = []
            self.state.gpa_result = None
        elif self.state.view is View.CGPA:
            self.state.cgpa_result = None
        self.state.view = View.HOME

    # GPA

    def add_course(self) -> CourseRow:
        row = CourseRow()
        self.state.courses.append(row)
        return row

    def edit_course(self, index: int, field: str, value: Union[str, int, float]) -> CourseRow:
        updated = apply_edit(self.state.courses[index], field, value)
        self.state.courses[index] = updated
        return updated

    def submit_courses(self) -> GpaResult:
        ensure_valid_courses(self.state.courses)
        result = compute_gpa(self.state.courses)
        logger.debug("Computed GPA %.4f over %d course(s)", result.gpa, len(result.processed))
        self.state.gpa_result = result
        self.state.view = View.GPA_RESULT
        return result

    def transfer_to_cgpa(self) -> Optional[SemesterRow]:
        row = transfer(self.state.gpa_result, self.store)
        if row is None:
            return None
        self._sync_semesters()
        self.state.view = View.CGPA
        return row

    # CGPA

    def add_semester(self) -> SemesterRow:
        row = self.store.append()
        self._sync_semesters()
        return row

    def edit_semester(self, index: int, field: str, value: Union[str, int, float]) -> SemesterRow:
        row = self.store.edit(index, field, value)
        self._sync_semesters()
        return row

    def submit_semesters(self) -> CgpaResult:
        ensure_valid_semesters(self.state.semesters)
        result = compute_cgpa(self.state.semesters)
        logger.debug("Computed CGPA %.4f over %d semester(s)", result.cgpa, result.semester_count)
        self.state.cgpa_result = result
        return result

    def clear_semesters(self, confirmed: bool) -> bool:
        if not confirmed:
            return False
        self.store.clear()
        self._sync_semesters()
        self.state.cgpa_result = None
        return True

    # Export

    def export(self, kind: str, directory: Union[str, Path] = settings.export_dir) -> Path:
        if kind == "GPA" and self.state.gpa_result is not None:
            document = build_gpa_report(self.state.gpa_result)
        elif kind == "CGPA" and self.state.cgpa_result is not None:
            document = build_cgpa_report(self.state.cgpa_result)
        else:
            raise ValueError(f"No {kind} result to export")
        return save_report(document, directory)
