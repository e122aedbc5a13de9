from typing import Callable
import flet as ft

from gpacalc.state.controller import AppController


def build_home_view(page: ft.Page, controller: AppController, on_change: Callable[[], None]) -> ft.Control:
    def go(action: Callable[[], None]):
        def handler(_):
            action()
            on_change()

        return handler

    return ft.Container(
        alignment=ft.Alignment.CENTER,
        padding=20,
        content=ft.Column(
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            controls=[
                ft.Text("GPA / CGPA Calculator", size=30, weight=ft.FontWeight.BOLD),
                ft.Button("Calculate GPA", width=240, on_click=go(controller.start_gpa)),
                ft.Button("Calculate CGPA", width=240, on_click=go(controller.open_cgpa)),
            ],
        ),
    )
