"""Log in through the login form."""

from __future__ import annotations

from typing import TYPE_CHECKING

from screenplay.core.exceptions import ConfigError
from screenplay.healthtech.tasks.start import Start
from screenplay.healthtech.ui import login_page
from screenplay.tasks import Click, Enter, Task, WaitUntil

if TYPE_CHECKING:
    from screenplay.core.models import Config


class Login:
    @staticmethod
    def with_credentials(email: str, password: str) -> Task:
        return Task.where(
            f"log in as {email}",
            Start.on_the_login_page(),
            WaitUntil.visible(login_page.EMAIL_INPUT),
            Enter.the_value(email).into(login_page.EMAIL_INPUT),
            Enter.the_secret(password).into(login_page.PASSWORD_INPUT),
            Click.on(login_page.LOGIN_BUTTON),
        )

    @classmethod
    def as_role(cls, role: str, config: Config) -> Task:
        """Log in with the credentials configured for role (nurse, doctor, admin)."""
        credentials = config.credentials.get(role)
        if credentials is None:
            msg = f"No credentials configured for role '{role}'"
            raise ConfigError(msg)
        return cls.with_credentials(credentials.email, credentials.password)

    @classmethod
    def as_nurse(cls, config: Config) -> Task:
        return cls.as_role("nurse", config)

    @classmethod
    def as_doctor(cls, config: Config) -> Task:
        return cls.as_role("doctor", config)

    @classmethod
    def as_admin(cls, config: Config) -> Task:
        return cls.as_role("admin", config)
