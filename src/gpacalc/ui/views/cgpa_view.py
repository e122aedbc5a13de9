from typing import Callable
import flet as ft

from gpacalc.core.validation import RowValidationError
from gpacalc.services.report_service import format_number
from gpacalc.state.controller import AppController


def build_cgpa_view(page: ft.Page, controller: AppController, on_change: Callable[[], None]) -> ft.Control:
    status = ft.Text(color=ft.Colors.RED_400)
    rows_column = ft.Column(spacing=10)

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400
        page.update()

    def make_edit_handler(index: int, field: str):
        def handler(e):
            proposed = e.control.value
            row = controller.edit_semester(index, field, proposed)
            current = getattr(row, field)
            if current != proposed:
                e.control.value = str(current)
                page.update()

        return handler

    semesters = controller.state.semesters
    if not semesters:
        rows_column.controls.append(ft.Text("No semesters added yet."))

    for index, semester in enumerate(semesters):
        rows_column.controls.append(
            ft.Row(
                controls=[
                    ft.Text(f"Sem {index + 1}", weight=ft.FontWeight.BOLD, width=60),
                    ft.TextField(
                        label="GPA",
                        width=120,
                        value=str(semester.gpa),
                        keyboard_type=ft.KeyboardType.NUMBER,
                        on_change=make_edit_handler(index, "gpa"),
                    ),
                    ft.TextField(
                        label="Credits",
                        width=120,
                        value=str(semester.credit),
                        keyboard_type=ft.KeyboardType.NUMBER,
                        input_filter=ft.InputFilter(regex_string=r"^[0-9]*$", allow=True, replacement_string=""),
                        on_change=make_edit_handler(index, "credit"),
                    ),
                ]
            )
        )

    def on_add(_):
        controller.add_semester()
        on_change()

    def on_confirm_clear(confirmed: bool):
        def handler(_):
            page.pop_dialog()
            if controller.clear_semesters(confirmed):
                on_change()

        return handler

    confirm_dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Clear saved data"),
        content=ft.Text("Are you sure you want to clear all saved semester data?"),
        actions=[
            ft.TextButton("Yes", on_click=on_confirm_clear(True)),
            ft.TextButton("No", on_click=on_confirm_clear(False)),
        ],
    )

    def on_clear(_):
        page.show_dialog(confirm_dialog)

    def on_calculate(_):
        try:
            controller.submit_semesters()
        except RowValidationError as exc:
            set_status("\n".join(exc.problems))
            return
        on_change()

    def on_export(_):
        try:
            path = controller.export("CGPA")
        except (OSError, ValueError) as exc:
            set_status(f"Export failed: {exc}")
            return
        set_status(f"Saved {path}", is_error=False)

    def on_home(_):
        controller.go_home()
        on_change()

    controls = [
        ft.Text("CGPA Calculator", size=24, weight=ft.FontWeight.BOLD),
        ft.Row(
            controls=[
                ft.Button("+ Add Semester", on_click=on_add),
                ft.OutlinedButton("Clear Data", icon=ft.Icons.DELETE, on_click=on_clear),
            ]
        ),
        rows_column,
    ]
    if semesters:
        controls.append(ft.Button("Calculate CGPA", on_click=on_calculate))

    result = controller.state.cgpa_result
    if result:
        controls.extend(
            [
                ft.Divider(),
                ft.Text(f"CGPA: {result.cgpa:.2f}", size=20, weight=ft.FontWeight.BOLD),
                ft.Text(f"Total Credits: {format_number(result.total_credits)}"),
                ft.OutlinedButton("Download CGPA Report", icon=ft.Icons.DESCRIPTION, on_click=on_export),
            ]
        )

    controls.extend([status, ft.Button("Back to Home", on_click=on_home)])
    return ft.Container(padding=20, content=ft.Column(scroll=ft.ScrollMode.AUTO, controls=controls))
