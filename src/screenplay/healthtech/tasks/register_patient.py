"""Register a patient through the nurse's three-step registration form.

    RegisterPatient.named("Juan Pérez").aged(45).with_identification("12345678A")
        .with_symptoms("Dolor torácico").with_priority("P3")

Every with_* call returns a new builder. Optional fields (emergency contact,
blood pressure, priority) are included or left out when the Task is built.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from screenplay.core.models import WaitProfile
from screenplay.healthtech.ui import nurse_dashboard as nurse
from screenplay.tasks import (
    Click,
    Enter,
    Performable,
    SelectFromOptions,
    Task,
    WaitUntil,
    Wizard,
    WizardStep,
    included_if,
)

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor

_BLOOD_PRESSURE = re.compile(r"^\s*(\d{2,3})\s*/\s*(\d{2,3})\s*$")
_PRIORITY = re.compile(r"^P?([1-5])$", re.IGNORECASE)


class PatientDetails(BaseModel):
    """Form values for one patient. Empty optional fields are skipped."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0, le=150)
    gender: str = Field(default="Masculino", min_length=1)
    identification: str = Field(..., min_length=1)
    emergency_contact: str = ""
    emergency_phone: str = ""
    symptoms: str = Field(..., min_length=1)
    blood_pressure: str = "120/80"
    heart_rate: int = Field(default=70, ge=0, le=300)
    temperature: float = Field(default=36.5, ge=25.0, le=45.0)
    oxygen_saturation: int = Field(default=98, ge=0, le=100)
    respiratory_rate: int = Field(default=16, ge=0, le=100)
    priority: str = ""

    @field_validator("blood_pressure")
    @classmethod
    def check_blood_pressure(cls, v: str) -> str:
        if v and not _BLOOD_PRESSURE.match(v):
            msg = f"blood pressure must look like '120/80', got {v!r}"
            raise ValueError(msg)
        return v.strip()

    @field_validator("priority")
    @classmethod
    def normalize_priority(cls, v: str) -> str:
        if not v:
            return ""
        match = _PRIORITY.match(v.strip())
        if match is None:
            msg = f"priority must be P1..P5 or 1..5, got {v!r}"
            raise ValueError(msg)
        return match.group(1)

    @property
    def systolic(self) -> str:
        match = _BLOOD_PRESSURE.match(self.blood_pressure)
        return match.group(1) if match else ""

    @property
    def diastolic(self) -> str:
        match = _BLOOD_PRESSURE.match(self.blood_pressure)
        return match.group(2) if match else ""


def registration_of(details: PatientDetails) -> Task:
    """The full registration Task: open the form, fill three steps, submit."""
    priority = nurse.priority_button(details.priority)
    wizard = Wizard(
        title="patient registration",
        steps=(
            WizardStep.of(
                "personal information",
                nurse.PATIENT_NAME_INPUT,
                Enter.the_value(details.name).into(nurse.PATIENT_NAME_INPUT),
                Enter.the_value(details.age).into(nurse.PATIENT_AGE_INPUT),
                SelectFromOptions.by_visible_text(details.gender).from_(
                    nurse.PATIENT_GENDER_SELECT
                ),
                Enter.the_value(details.identification).into(nurse.PATIENT_ID_INPUT),
                included_if(
                    details.emergency_contact,
                    Enter.the_value(details.emergency_contact).into(nurse.EMERGENCY_CONTACT_INPUT),
                ),
                included_if(
                    details.emergency_phone,
                    Enter.the_value(details.emergency_phone).into(nurse.EMERGENCY_PHONE_INPUT),
                ),
            ),
            WizardStep.of(
                "symptoms and vital signs",
                nurse.SYMPTOMS_TEXTAREA,
                Enter.the_value(details.symptoms).into(nurse.SYMPTOMS_TEXTAREA),
                included_if(
                    details.blood_pressure,
                    Enter.the_value(details.systolic).into(nurse.BLOOD_PRESSURE_SYSTOLIC),
                    Enter.the_value(details.diastolic).into(nurse.BLOOD_PRESSURE_DIASTOLIC),
                ),
                Enter.the_value(details.heart_rate).into(nurse.HEART_RATE_INPUT),
                Enter.the_value(details.temperature).into(nurse.TEMPERATURE_INPUT),
                Enter.the_value(details.oxygen_saturation).into(nurse.OXYGEN_SATURATION_INPUT),
                Enter.the_value(details.respiratory_rate).into(nurse.RESPIRATORY_RATE_INPUT),
            ),
            WizardStep.of(
                "priority",
                nurse.SUBMIT_BUTTON,
                included_if(
                    details.priority,
                    WaitUntil.clickable(priority, WaitProfile.ELEMENT),
                    Click.on(priority),
                ),
            ),
        ),
        advance=nurse.NEXT_BUTTON,
        submit=nurse.SUBMIT_BUTTON,
    )
    return Task.where(
        f"register patient {details.name}",
        WaitUntil.clickable(nurse.REGISTER_PATIENT_BUTTON, WaitProfile.ELEMENT),
        Click.on(nurse.REGISTER_PATIENT_BUTTON),
        wizard,
    )


class RegisterPatient(Performable):
    """Immutable builder. Performing it builds and performs the registration Task."""

    def __init__(self, **fields: Any) -> None:
        self._fields = fields

    @classmethod
    def named(cls, name: str) -> RegisterPatient:
        return cls(name=name)

    @classmethod
    def with_details(cls, details: PatientDetails) -> RegisterPatient:
        return cls(**details.model_dump())

    def _with(self, **changes: Any) -> RegisterPatient:
        return RegisterPatient(**{**self._fields, **changes})

    def aged(self, age: int) -> RegisterPatient:
        return self._with(age=age)

    def with_gender(self, gender: str) -> RegisterPatient:
        return self._with(gender=gender)

    def with_identification(self, identification: str) -> RegisterPatient:
        return self._with(identification=identification)

    def with_emergency_contact(self, contact: str, phone: str = "") -> RegisterPatient:
        return self._with(emergency_contact=contact, emergency_phone=phone)

    def with_symptoms(self, symptoms: str) -> RegisterPatient:
        return self._with(symptoms=symptoms)

    def with_vital_signs(
        self,
        blood_pressure: str = "120/80",
        heart_rate: int = 70,
        temperature: float = 36.5,
        oxygen_saturation: int = 98,
        respiratory_rate: int = 16,
    ) -> RegisterPatient:
        return self._with(
            blood_pressure=blood_pressure,
            heart_rate=heart_rate,
            temperature=temperature,
            oxygen_saturation=oxygen_saturation,
            respiratory_rate=respiratory_rate,
        )

    def with_priority(self, priority: str | int) -> RegisterPatient:
        return self._with(priority=str(priority))

    def details(self) -> PatientDetails:
        """Validate the collected fields. Raises pydantic.ValidationError."""
        return PatientDetails(**self._fields)

    def build(self) -> Task:
        return registration_of(self.details())

    def describe(self) -> str:
        return f"register patient {self._fields.get('name', '?')}"

    async def perform_as(self, actor: Actor) -> None:
        await self.build().perform_as(actor)
