from typing import Dict, Iterator, List, Optional, Union

from fastapi import Depends, FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from gpacalc.config.settings import settings
from gpacalc.core.gpa import CgpaResult, CourseRow, GpaResult, SemesterRow, compute_cgpa, compute_gpa
from gpacalc.core.grades import GRADING_SCHEME
from gpacalc.core.validation import (
    RowValidationError,
    ensure_storable_semesters,
    ensure_valid_courses,
    ensure_valid_semesters,
)
from gpacalc.services.report_service import ReportDocument, build_cgpa_report, build_gpa_report
from gpacalc.services.semester_store import SemesterStore, SemesterStoreError, transfer


app = FastAPI(title="GPA Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

RawValue = Union[float, str]


class CoursePayload(BaseModel):
    title: str = ""
    credit: RawValue = ""
    marks: RawValue = ""


class SemesterPayload(BaseModel):
    gpa: RawValue = ""
    credit: RawValue = ""


class CoursesPayload(BaseModel):
    courses: List[CoursePayload]


class SemestersPayload(BaseModel):
    semesters: Optional[List[SemesterPayload]] = None


class EditPayload(BaseModel):
    field: str
    value: RawValue


def get_semester_store() -> Iterator[SemesterStore]:
    store = SemesterStore.from_settings()
    store.load()
    try:
        yield store
    finally:
        store.storage.close()


def _courses(payload: CoursesPayload) -> List[CourseRow]:
    return [CourseRow(**course.model_dump()) for course in payload.courses]


def _semester_dicts(store: SemesterStore) -> List[Dict]:
    return [row.to_dict() for row in store.rows]


def _gpa_body(result: GpaResult) -> Dict:
    return {
        "processed": [
            {
                "index": course.index,
                "title": course.title,
                "credit": course.credit,
                "marks": course.marks,
                "grade": course.grade,
                "point": course.point,
                "weighted_point": course.weighted_point,
            }
            for course in result.processed
        ],
        "total_credit": result.total_credit,
        "total_weighted_point": result.total_weighted_point,
        "gpa": result.gpa,
    }


def _cgpa_body(result: CgpaResult) -> Dict:
    return {
        "cgpa": result.cgpa,
        "total_credits": result.total_credits,
        "semester_count": result.semester_count,
    }


def _submitted_gpa(payload: CoursesPayload) -> GpaResult:
    rows = _courses(payload)
    try:
        ensure_valid_courses(rows)
    except RowValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.problems) from exc
    return compute_gpa(rows)


def _submitted_cgpa(payload: SemestersPayload, store: SemesterStore) -> CgpaResult:
    if payload.semesters is None:
        rows = store.rows
    else:
        rows = [SemesterRow(**semester.model_dump()) for semester in payload.semesters]
    try:
        ensure_valid_semesters(rows)
    except RowValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.problems) from exc
    return compute_cgpa(rows)


def _storable_rows(semesters: List[SemesterPayload]) -> List[SemesterRow]:
    rows = [SemesterRow(**semester.model_dump()) for semester in semesters]
    try:
        ensure_storable_semesters(rows)
    except RowValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.problems) from exc
    return rows


def _document_response(document: ReportDocument) -> Response:
    return Response(
        content=document.render(),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={document.filename}"},
    )


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/grading-scheme")
def grading_scheme() -> List[Dict]:
    return [
        {"min": band.min, "max": band.max, "grade": band.grade, "point": band.point}
        for band in GRADING_SCHEME
    ]


@app.post("/gpa")
def calculate_gpa(payload: CoursesPayload) -> Dict:
    return _gpa_body(_submitted_gpa(payload))


@app.post("/cgpa")
def calculate_cgpa(payload: SemestersPayload, store: SemesterStore = Depends(get_semester_store)) -> Dict:
    return _cgpa_body(_submitted_cgpa(payload, store))


@app.get("/semesters")
def list_semesters(store: SemesterStore = Depends(get_semester_store)) -> List[Dict]:
    return _semester_dicts(store)


@app.put("/semesters")
def replace_semesters(payload: SemestersPayload, store: SemesterStore = Depends(get_semester_store)) -> List[Dict]:
    store.replace(_storable_rows(payload.semesters or []))
    return _semester_dicts(store)


@app.post("/semesters", status_code=status.HTTP_201_CREATED)
def add_semester(
    payload: Optional[SemesterPayload] = None,
    store: SemesterStore = Depends(get_semester_store),
) -> List[Dict]:
    store.append(_storable_rows([payload])[0] if payload else None)
    return _semester_dicts(store)


@app.patch("/semesters/{index}")
def edit_semester(index: int, payload: EditPayload, store: SemesterStore = Depends(get_semester_store)) -> Dict:
    try:
        row = store.edit(index - 1, payload.field, payload.value)
    except SemesterStoreError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return row.to_dict()


@app.delete("/semesters")
def clear_semesters(confirm: bool = False, store: SemesterStore = Depends(get_semester_store)) -> Dict[str, str]:
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Clearing saved semesters requires confirm=true",
        )
    store.clear()
    return {"status": "cleared"}


@app.post("/semesters/transfer", status_code=status.HTTP_201_CREATED)
def transfer_gpa(payload: CoursesPayload, store: SemesterStore = Depends(get_semester_store)) -> Dict:
    row = transfer(_submitted_gpa(payload), store)
    return row.to_dict()


@app.post("/reports/gpa")
def gpa_report(payload: CoursesPayload) -> Response:
    return _document_response(build_gpa_report(_submitted_gpa(payload)))


@app.post("/reports/cgpa")
def cgpa_report(payload: SemestersPayload, store: SemesterStore = Depends(get_semester_store)) -> Response:
    return _document_response(build_cgpa_report(_submitted_cgpa(payload, store)))
