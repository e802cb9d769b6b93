"""HealthTech domain Tasks."""

from screenplay.healthtech.tasks.add_comment import AddComment
from screenplay.healthtech.tasks.login import Login
from screenplay.healthtech.tasks.register_patient import PatientDetails, RegisterPatient
from screenplay.healthtech.tasks.start import Start
from screenplay.healthtech.tasks.take_patient_case import TakePatientCase
from screenplay.healthtech.tasks.update_patient_process import (
    ProcessType,
    UpdatePatientProcess,
)

__all__ = [
    "AddComment",
    "Login",
    "PatientDetails",
    "ProcessType",
    "RegisterPatient",
    "Start",
    "TakePatientCase",
    "UpdatePatientProcess",
]
