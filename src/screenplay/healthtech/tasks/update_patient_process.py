"""A doctor moves a patient to the next care process.

Hospitalization, discharge, referral and ICU each have a dedicated button in
the actions modal. Any other status is chosen from the process select.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from screenplay.core.models import WaitProfile
from screenplay.healthtech.tasks.patient_modal import open_patient_actions
from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.tasks import Click, Performable, SelectFromOptions, Task, WaitUntil

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.core.locator import Target


class ProcessType(StrEnum):
    HOSPITALIZATION = "hospitalization"
    DISCHARGE = "discharge"
    REFERRAL = "referral"
    ICU = "icu"


_BUTTONS: dict[ProcessType, Target] = {
    ProcessType.HOSPITALIZATION: doctor.HOSPITALIZE_BUTTON,
    ProcessType.DISCHARGE: doctor.DISCHARGE_BUTTON,
    ProcessType.REFERRAL: doctor.TRANSFER_BUTTON,
    ProcessType.ICU: doctor.ICU_BUTTON,
}


class UpdatePatientProcess(Performable):
    """Immutable builder: UpdatePatientProcess.for_patient(name).to_discharge()."""

    def __init__(
        self,
        patient_name: str,
        process: ProcessType | str | None = None,
        details: str = "",
    ) -> None:
        self.patient_name = patient_name
        self.process = process
        self.details = details

    @classmethod
    def for_patient(cls, patient_name: str) -> UpdatePatientProcess:
        return cls(patient_name)

    def to_hospitalization(self, days: str | int = "") -> UpdatePatientProcess:
        detail = f"{days} days" if days else ""
        return UpdatePatientProcess(self.patient_name, ProcessType.HOSPITALIZATION, detail)

    def to_discharge(self) -> UpdatePatientProcess:
        return UpdatePatientProcess(self.patient_name, ProcessType.DISCHARGE)

    def to_referral(self, clinic: str = "") -> UpdatePatientProcess:
        return UpdatePatientProcess(self.patient_name, ProcessType.REFERRAL, clinic)

    def to_icu(self) -> UpdatePatientProcess:
        return UpdatePatientProcess(self.patient_name, ProcessType.ICU)

    def to_status(self, status: str) -> UpdatePatientProcess:
        """Any status offered by the process select, by its visible text."""
        return UpdatePatientProcess(self.patient_name, status)

    def build(self) -> Task:
        if not self.process:
            msg = f"No process chosen for patient {self.patient_name}"
            raise ValueError(msg)
        if isinstance(self.process, ProcessType):
            button = _BUTTONS[self.process]
            choose = (WaitUntil.clickable(button), Click.on(button))
        else:
            choose = (
                WaitUntil.visible(doctor.PROCESS_SELECT, WaitProfile.CONTROL),
                SelectFromOptions.by_visible_text(self.process).from_(doctor.PROCESS_SELECT),
                Click.on(doctor.UPDATE_STATUS_BUTTON),
            )
        return Task.where(self.describe(), open_patient_actions(self.patient_name), choose)

    def describe(self) -> str:
        process = self.process or "?"
        suffix = f" ({self.details})" if self.details else ""
        return f"update the process of {self.patient_name} to {process}{suffix}"

    async def perform_as(self, actor: Actor) -> None:
        await self.build().perform_as(actor)
