from typing import Callable
import flet as ft

from gpacalc.services.report_service import format_number
from gpacalc.state.controller import AppController


def build_gpa_result_view(page: ft.Page, controller: AppController, on_change: Callable[[], None]) -> ft.Control:
    result = controller.state.gpa_result
    status = ft.Text()

    def set_status(message: str, is_error: bool = True) -> None:
        status.value = message
        status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400
        page.update()

    def on_transfer(_):
        controller.transfer_to_cgpa()
        on_change()

    def on_export(_):
        try:
            path = controller.export("GPA")
        except (OSError, ValueError) as exc:
            set_status(f"Export failed: {exc}")
            return
        set_status(f"Saved {path}", is_error=False)

    def on_home(_):
        controller.go_home()
        on_change()

    breakdown = [
        ft.Text(f"{course.index}. {course.title} - Grade: {course.grade} ({format_number(course.marks)})")
        for course in result.processed
    ] if result else []

    return ft.Container(
        padding=20,
        content=ft.Column(
            scroll=ft.ScrollMode.AUTO,
            controls=[
                ft.Text("GPA Result", size=24, weight=ft.FontWeight.BOLD),
                ft.Card(
                    content=ft.Container(
                        padding=16,
                        content=ft.Column(
                            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                            controls=[
                                ft.Text(f"{result.gpa:.2f}" if result else "-", size=40, weight=ft.FontWeight.BOLD),
                                ft.Text("GPA"),
                                ft.Text(f"Total Credits: {format_number(result.total_credit)}" if result else ""),
                            ],
                        ),
                    )
                ),
                *breakdown,
                ft.Row(
                    controls=[
                        ft.Button("Save to CGPA List", icon=ft.Icons.DOWNLOAD, on_click=on_transfer),
                        ft.OutlinedButton("Download Report", icon=ft.Icons.DESCRIPTION, on_click=on_export),
                    ]
                ),
                status,
                ft.Button("Back to Home", on_click=on_home),
            ],
        ),
    )
