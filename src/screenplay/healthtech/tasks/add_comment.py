"""A doctor adds a comment to a patient's record."""

from __future__ import annotations

from screenplay.core.models import WaitProfile
from screenplay.healthtech.tasks.patient_modal import open_patient_actions
from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.tasks import Click, Enter, Task, WaitUntil


class AddComment:
    @staticmethod
    def to_patient(patient_name: str, comment: str) -> Task:
        if not comment:
            msg = "comment must not be empty"
            raise ValueError(msg)
        return Task.where(
            f"add a comment to {patient_name}",
            open_patient_actions(patient_name),
            WaitUntil.visible(doctor.COMMENT_TEXTAREA),
            Enter.the_value(comment).into(doctor.COMMENT_TEXTAREA),
            WaitUntil.clickable(doctor.SAVE_COMMENT_BUTTON, WaitProfile.CONTROL),
            Click.on(doctor.SAVE_COMMENT_BUTTON),
        )
