"""Opening a patient's actions modal from the doctor dashboard."""

from __future__ import annotations

from screenplay.core.models import WaitProfile
from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.tasks import Click, Task, WaitUntil


def open_patient_actions(patient_name: str) -> Task:
    card = doctor.PATIENT_CARD.of(patient_name)
    return Task.where(
        f"open the actions of {patient_name}",
        WaitUntil.visible(card),
        Click.on(card),
        WaitUntil.visible(doctor.MODAL_TITLE, WaitProfile.CONTROL),
    )
