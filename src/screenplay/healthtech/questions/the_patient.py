"""Questions about one patient and the toasts that follow patient actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.healthtech.ui import nurse_dashboard as nurse
from screenplay.questions import Question, Text, Visibility

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

SUCCESS_WORDS = ("éxito", "exitosamente", "success")
UNKNOWN_STATUS = "unknown"


class ThePatient:
    @staticmethod
    def is_registered(patient_name: str) -> Question[bool]:
        """The patient's card is visible, or the list mentions the name."""

        async def answer(actor: Actor) -> bool:
            if await actor.asks_for(Visibility.of(nurse.PATIENT_ITEM.of(patient_name))):
                return True
            return patient_name in await actor.asks_for(Text.of(nurse.PATIENT_LIST))

        return Question.about(f"whether {patient_name} is registered", answer, default=False)

    @staticmethod
    def has_success_message() -> Question[bool]:
        async def answer(actor: Actor) -> bool:
            if await actor.asks_for(Visibility.of(nurse.SUCCESS_MESSAGE)):
                return True
            text = (await actor.asks_for(Text.of(nurse.SUCCESS_MESSAGE))).lower()
            return any(word in text for word in SUCCESS_WORDS)

        return Question.about("whether a success message is displayed", answer, default=False)

    @staticmethod
    def has_error_message() -> Question[bool]:
        return Visibility.of(nurse.ERROR_MESSAGE)

    @staticmethod
    def current_status(patient_name: str) -> Question[str]:
        badge = Text.of(doctor.PATIENT_STATUS.of(patient_name))
        return Question.about(
            f"the status of {patient_name}", badge.answered_by, default=UNKNOWN_STATUS
        )

    @staticmethod
    def has_process(process: str) -> Question[bool]:
        """The process select currently shows process (case-insensitive)."""

        async def answer(actor: Actor) -> bool:
            shown = await Text.of(doctor.PROCESS_SELECT).answered_by(actor)
            return process.lower() in shown.lower()

        return Question.about(f"whether the process is {process}", answer, default=False)
