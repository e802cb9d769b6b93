"""Navigation entry points, relative to the configured base URL."""

from __future__ import annotations

from screenplay.tasks import Open, Task

LOGIN_PATH = "/login"
NURSE_DASHBOARD_PATH = "/nurse"
DOCTOR_DASHBOARD_PATH = "/doctor"


class Start:
    @staticmethod
    def on_the_login_page() -> Task:
        return Task.where("start on the login page", Open.path(LOGIN_PATH))

    @staticmethod
    def on_the_nurse_dashboard() -> Task:
        return Task.where("start on the nurse dashboard", Open.path(NURSE_DASHBOARD_PATH))

    @staticmethod
    def on_the_doctor_dashboard() -> Task:
        return Task.where("start on the doctor dashboard", Open.path(DOCTOR_DASHBOARD_PATH))
