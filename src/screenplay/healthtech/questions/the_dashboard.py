"""Questions about which dashboard is on screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.healthtech.ui import nurse_dashboard as nurse
from screenplay.questions import Count, Question, Visibility

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.core.locator import Target


def _all_visible(description: str, *targets: Target) -> Question[bool]:
    async def answer(actor: Actor) -> bool:
        for target in targets:
            if not await actor.asks_for(Visibility.of(target)):
                return False
        return True

    return Question.about(description, answer, default=False)


class TheDashboard:
    @staticmethod
    def is_displayed() -> Question[bool]:
        """Either dashboard, recognised by any of its landmarks."""
        landmarks = (
            nurse.DASHBOARD_TITLE,
            doctor.DASHBOARD_TITLE,
            nurse.REGISTER_PATIENT_BUTTON,
            doctor.PATIENT_LIST,
        )

        async def answer(actor: Actor) -> bool:
            for target in landmarks:
                if await actor.asks_for(Visibility.of(target)):
                    return True
            return False

        return Question.about("whether a dashboard is displayed", answer, default=False)

    @staticmethod
    def nurse_dashboard_is_displayed() -> Question[bool]:
        return _all_visible(
            "whether the nurse dashboard is displayed",
            nurse.DASHBOARD_TITLE,
            nurse.REGISTER_PATIENT_BUTTON,
        )

    @staticmethod
    def doctor_dashboard_is_displayed() -> Question[bool]:
        return _all_visible(
            "whether the doctor dashboard is displayed",
            doctor.DASHBOARD_TITLE,
            doctor.PATIENT_LIST,
        )

    @staticmethod
    def patient_count() -> Question[int]:
        return Count.of(doctor.PATIENT_CARDS)
