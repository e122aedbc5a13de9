from typing import Callable
import flet as ft

from gpacalc.core.grades import GRADING_SCHEME
from gpacalc.services.report_service import format_number
from gpacalc.state.controller import AppController


def build_scheme_view(page: ft.Page, controller: AppController, on_change: Callable[[], None]) -> ft.Control:
    table = ft.DataTable(
        columns=[
            ft.DataColumn(label=ft.Text("Marks")),
            ft.DataColumn(label=ft.Text("Grade")),
            ft.DataColumn(label=ft.Text("Point")),
        ],
        rows=[
            ft.DataRow(
                cells=[
                    ft.DataCell(ft.Text(f"{format_number(band.min)} - {format_number(band.max)}")),
                    ft.DataCell(ft.Text(band.grade)),
                    ft.DataCell(ft.Text(f"{band.point:.2f}")),
                ]
            )
            for band in GRADING_SCHEME
        ],
    )

    def on_start(_):
        controller.begin_courses()
        on_change()

    return ft.Container(
        padding=20,
        content=ft.Column(
            scroll=ft.ScrollMode.AUTO,
            controls=[
                ft.Text("Grading Scheme", size=24, weight=ft.FontWeight.BOLD),
                table,
                ft.Button("Start Calculation", on_click=on_start),
            ],
        ),
    )
