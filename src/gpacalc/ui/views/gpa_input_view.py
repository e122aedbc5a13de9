from typing import Callable
import flet as ft

from gpacalc.core.validation import RowValidationError
from gpacalc.state.controller import AppController


def build_gpa_input_view(page: ft.Page, controller: AppController, on_change: Callable[[], None]) -> ft.Control:
    status = ft.Text(color=ft.Colors.RED_400)
    rows_column = ft.Column(spacing=10)

    def make_edit_handler(index: int, field: str):
        def handler(e):
            proposed = e.control.value
            row = controller.edit_course(index, field, proposed)
            current = getattr(row, field)
            if current != proposed:
                # Rejected edit: put the previous value back in the box.
                e.control.value = str(current)
                page.update()

        return handler

    for index, course in enumerate(controller.state.courses):
        rows_column.controls.append(
            ft.Row(
                controls=[
                    ft.TextField(
                        label="Course Title",
                        width=280,
                        value=course.title,
                        on_change=make_edit_handler(index, "title"),
                    ),
                    ft.TextField(
                        label="Credits",
                        width=120,
                        value=str(course.credit),
                        keyboard_type=ft.KeyboardType.NUMBER,
                        on_change=make_edit_handler(index, "credit"),
                    ),
                    ft.TextField(
                        label="Marks",
                        width=120,
                        value=str(course.marks),
                        keyboard_type=ft.KeyboardType.NUMBER,
                        on_change=make_edit_handler(index, "marks"),
                    ),
                ]
            )
        )

    def on_add(_):
        controller.add_course()
        on_change()

    def on_calculate(_):
        try:
            controller.submit_courses()
        except RowValidationError as exc:
            status.value = "\n".join(exc.problems)
            page.update()
            return
        on_change()

    controls = [
        ft.Text("GPA Calculator", size=24, weight=ft.FontWeight.BOLD),
        ft.Button("+ Add Course", on_click=on_add),
        rows_column,
    ]
    if controller.state.courses:
        controls.append(ft.Button("Calculate Result", on_click=on_calculate))
    controls.append(status)

    return ft.Container(padding=20, content=ft.Column(scroll=ft.ScrollMode.AUTO, controls=controls))
