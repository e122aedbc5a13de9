from __future__ import annotations

import flet as ft

from gpacalc.services.semester_store import SemesterStore
from gpacalc.state.app_state import View
from gpacalc.state.controller import AppController
from gpacalc.ui.views.cgpa_view import build_cgpa_view
from gpacalc.ui.views.gpa_input_view import build_gpa_input_view
from gpacalc.ui.views.gpa_result_view import build_gpa_result_view
from gpacalc.ui.views.home_view import build_home_view
from gpacalc.ui.views.scheme_view import build_scheme_view

VIEW_BUILDERS = {
    View.HOME: build_home_view,
    View.SCHEME: build_scheme_view,
    View.GPA_INPUT: build_gpa_input_view,
    View.GPA_RESULT: build_gpa_result_view,
    View.CGPA: build_cgpa_view,
}


class GpaCalcApp:
    def __init__(self, page: ft.Page, controller: AppController) -> None:
        self.page = page
        self.page.title = "GPA / CGPA Calculator"
        self.page.scroll = ft.ScrollMode.AUTO
        self.controller = controller

    def run(self) -> None:
        self.render()

    def render(self) -> None:
        view = self.controller.state.view
        if view is View.GPA_RESULT and self.controller.state.gpa_result is None:
            view = View.HOME
            self.controller.state.view = view

        self.page.clean()
        self.page.add(VIEW_BUILDERS[view](self.page, self.controller, self.render))


def main(page: ft.Page) -> None:
    GpaCalcApp(page, AppController(SemesterStore.from_settings())).run()
