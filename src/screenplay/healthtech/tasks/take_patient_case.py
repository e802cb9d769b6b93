"""A doctor assigns a waiting patient to themselves."""

from __future__ import annotations

from screenplay.core.models import WaitProfile
from screenplay.healthtech.tasks.patient_modal import open_patient_actions
from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.tasks import Click, Enter, Task, WaitUntil, included_if


class TakePatientCase:
    @staticmethod
    def for_patient(patient_name: str, comment: str = "") -> Task:
        """Take the case, entering comment first when one is given."""
        return Task.where(
            f"take the case of {patient_name}",
            open_patient_actions(patient_name),
            included_if(
                comment,
                WaitUntil.visible(doctor.COMMENT_TEXTAREA, WaitProfile.CONTROL),
                Enter.the_value(comment).into(doctor.COMMENT_TEXTAREA),
            ),
            WaitUntil.clickable(doctor.TAKE_CASE_BUTTON, WaitProfile.ELEMENT),
            Click.on(doctor.TAKE_CASE_BUTTON),
        )

    @classmethod
    def for_patient_with_comment(cls, patient_name: str, comment: str) -> Task:
        return cls.for_patient(patient_name, comment)
