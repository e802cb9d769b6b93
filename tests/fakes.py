"""In-memory driver boundary and a simulated HealthTech triage app.

FakeDriver keys elements by the rendered locator string, so a test places
elements through the same Targets the code under test resolves. Every
boundary call is recorded in FakeDriver.calls.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from screenplay.core.exceptions import ElementNotFound, ElementNotInteractable
from screenplay.core.locator import FallbackChain, Locator, Target
from screenplay.engine.base import BaseDriver, BaseElement
from screenplay.healthtech.ui import doctor_dashboard as doctor
from screenplay.healthtech.ui import login_page as login
from screenplay.healthtech.ui import nurse_dashboard as nurse

STATUS_SELECT = doctor.PROCESS_SELECT.targets[1]


class FakeElement(BaseElement):
    def __init__(
        self,
        driver: FakeDriver,
        name: str,
        *,
        text: str = "",
        visible: bool = True,
        enabled: bool = True,
        on_click: Callable[[], None] | None = None,
    ) -> None:
        self.driver = driver
        self.name = name
        self.text_value = text
        self.visible = visible
        self.enabled = enabled
        self.on_click = on_click
        self.value = ""
        self.selected = ""
        self.detached = False

    def _check(self, action: str, *, needs_input: bool = True) -> None:
        if self.detached:
            raise ElementNotFound(f"Cannot {action}: detached", target=self.name)
        if needs_input and not (self.visible and self.enabled):
            raise ElementNotInteractable(f"Cannot {action}", target=self.name)

    async def click(self) -> None:
        self._check("click")
        self.driver.calls.append(("click", self.name))
        if self.on_click is not None:
            self.on_click()

    async def type(self, text: str) -> None:
        self._check("type")
        self.driver.calls.append(("type", self.name, text))
        self.value += text

    async def clear(self) -> None:
        self._check("clear")
        self.driver.calls.append(("clear", self.name))
        self.value = ""

    async def select_by_visible_text(self, text: str) -> None:
        self._check("select option")
        self.driver.calls.append(("select", self.name, text))
        self.selected = text

    async def select_by_value(self, value: str) -> None:
        self._check("select option")
        self.driver.calls.append(("select_value", self.name, value))
        self.selected = value

    async def text(self) -> str:
        self._check("read text", needs_input=False)
        return self.text_value

    async def is_visible(self) -> bool:
        return self.visible and not self.detached

    async def is_enabled(self) -> bool:
        return self.enabled and not self.detached


class FakeDriver(BaseDriver):
    def __init__(self) -> None:
        self.elements: dict[str, list[FakeElement]] = {}
        self.calls: list[tuple[str, ...]] = []
        self.started = False
        self.stopped = False
        self.url = ""
        self.on_open: Callable[[str], None] | None = None

    def place(self, target: Target | FallbackChain, **kwargs: object) -> FakeElement:
        """Render an element matching target (the primary link of a chain)."""
        if isinstance(target, FallbackChain):
            target = target.primary
        element = FakeElement(self, target.describe(), **kwargs)  # type: ignore[arg-type]
        self.elements.setdefault(str(target.locator()), []).append(element)
        return element

    def remove(self, target: Target | FallbackChain) -> None:
        if isinstance(target, FallbackChain):
            target = target.primary
        for element in self.elements.pop(str(target.locator()), []):
            element.detached = True

    def clear_page(self) -> None:
        for elements in self.elements.values():
            for element in elements:
                element.detached = True
        self.elements.clear()

    def element(self, target: Target) -> FakeElement:
        return self.elements[str(target.locator())][0]

    def boundary_calls(self) -> list[tuple[str, ...]]:
        """Recorded calls without the resolve() lookups."""
        return [call for call in self.calls if call[0] != "resolve"]

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    async def open(self, url: str) -> None:
        self.calls.append(("open", url))
        self.url = url
        if self.on_open is not None:
            self.on_open(url)

    async def resolve(self, locator: Locator) -> list[BaseElement]:
        self.calls.append(("resolve", str(locator)))
        return list(self.elements.get(str(locator), []))


@dataclass
class Patient:
    name: str
    age: str = ""
    gender: str = ""
    identification: str = ""
    symptoms: str = ""
    vitals: dict[str, str] = field(default_factory=dict)
    priority: str = ""
    doctor: str = ""
    status: str = "En espera"
    comments: list[str] = field(default_factory=list)


class TriageApp:
    """Simulated triage UI driven entirely through FakeDriver.

    Accepts the nurse and doctor default credentials, runs the three-step
    registration form and the doctor's patient actions modal.
    """

    USERS = {
        "ana.garcia@healthtech.com": ("password123", "nurse"),
        "carlos.mendoza@healthtech.com": ("password123", "doctor"),
    }
    PROCESS_BUTTONS = (
        (doctor.HOSPITALIZE_BUTTON, "Hospitalizado"),
        (doctor.DISCHARGE_BUTTON, "Alta"),
        (doctor.TRANSFER_BUTTON, "Remitido"),
        (doctor.ICU_BUTTON, "UCI"),
    )

    def __init__(self, driver: FakeDriver) -> None:
        self.driver = driver
        self.patients: dict[str, Patient] = {}
        self.role = ""
        driver.on_open = self._navigate

    # ── Navigation ──

    def _navigate(self, url: str) -> None:
        self.driver.clear_page()
        if url.endswith("/login"):
            self._render_login()
        elif url.endswith("/nurse") and self.role == "nurse":
            self._render_nurse_dashboard()
        elif url.endswith("/doctor") and self.role == "doctor":
            self._render_doctor_dashboard()

    def _render_login(self) -> None:
        d = self.driver
        d.place(login.LOGIN_HEADING, text="Iniciar Sesión")
        d.place(login.EMAIL_INPUT)
        d.place(login.PASSWORD_INPUT)
        d.place(login.LOGIN_BUTTON, on_click=self._submit_login)

    def _submit_login(self) -> None:
        email = self.driver.element(login.EMAIL_INPUT).value
        password = self.driver.element(login.PASSWORD_INPUT).value
        expected = self.USERS.get(email)
        if expected is None or expected[0] != password:
            self.driver.place(login.ERROR_MESSAGE, text="Credenciales inválidas")
            return
        self.role = expected[1]
        self.driver.clear_page()
        if self.role == "nurse":
            self._render_nurse_dashboard()
        else:
            self._render_doctor_dashboard()

    # ── Nurse ──

    def _render_nurse_dashboard(self) -> None:
        d = self.driver
        d.place(nurse.DASHBOARD_TITLE, text="Dashboard de Enfermería")
        d.place(nurse.REGISTER_PATIENT_BUTTON, on_click=self._open_registration)
        d.place(nurse.PATIENT_LIST, text="\n".join(self.patients))
        for name in self.patients:
            d.place(nurse.PATIENT_ITEM.of(name), text=name)

    def _open_registration(self) -> None:
        d = self.driver
        for target in (
            nurse.PATIENT_NAME_INPUT,
            nurse.PATIENT_AGE_INPUT,
            nurse.PATIENT_GENDER_SELECT,
            nurse.PATIENT_ID_INPUT,
            nurse.EMERGENCY_CONTACT_INPUT,
            nurse.EMERGENCY_PHONE_INPUT,
        ):
            d.place(target)
        d.place(nurse.NEXT_BUTTON, on_click=self._to_vitals)

    def _to_vitals(self) -> None:
        d = self.driver
        d.remove(nurse.NEXT_BUTTON)
        for target in (
            nurse.SYMPTOMS_TEXTAREA,
            nurse.BLOOD_PRESSURE_SYSTOLIC,
            nurse.BLOOD_PRESSURE_DIASTOLIC,
            nurse.HEART_RATE_INPUT,
            nurse.TEMPERATURE_INPUT,
            nurse.OXYGEN_SATURATION_INPUT,
            nurse.RESPIRATORY_RATE_INPUT,
        ):
            d.place(target)
        d.place(nurse.NEXT_BUTTON, on_click=self._to_priority)

    def _to_priority(self) -> None:
        d = self.driver
        d.remove(nurse.NEXT_BUTTON)
        for level in range(1, 6):
            d.place(nurse.priority_button(level), text=f"Nivel {level}")
        d.place(nurse.SUBMIT_BUTTON, on_click=self._submit_registration)

    def _submit_registration(self) -> None:
        d = self.driver
        patient = Patient(
            name=d.element(nurse.PATIENT_NAME_INPUT).value,
            age=d.element(nurse.PATIENT_AGE_INPUT).value,
            gender=d.element(nurse.PATIENT_GENDER_SELECT).selected,
            identification=d.element(nurse.PATIENT_ID_INPUT).value,
            symptoms=d.element(nurse.SYMPTOMS_TEXTAREA).value,
            vitals={
                "systolic": d.element(nurse.BLOOD_PRESSURE_SYSTOLIC).value,
                "diastolic": d.element(nurse.BLOOD_PRESSURE_DIASTOLIC).value,
                "heart_rate": d.element(nurse.HEART_RATE_INPUT).value,
            },
        )
        clicked = [c for c in d.calls if c[0] == "click" and c[1].startswith("priority button")]
        if clicked:
            patient.priority = clicked[-1][1].rsplit(" ", 1)[-1]
        self.patients[patient.name] = patient
        d.clear_page()
        self._render_nurse_dashboard()
        d.place(nurse.SUCCESS_MESSAGE, text="Paciente registrado exitosamente")

    # ── Doctor ──

    def _render_doctor_dashboard(self) -> None:
        d = self.driver
        d.place(doctor.DASHBOARD_TITLE, text="Dashboard Médico")
        d.place(doctor.PATIENT_LIST, text="\n".join(self.patients))
        for name, patient in self.patients.items():
            d.place(doctor.PATIENT_CARDS, text=name)
            d.place(doctor.PATIENT_CARD.of(name), text=name, on_click=self._modal_for(name))
            d.place(doctor.PATIENT_STATUS.of(name), text=patient.status)

    def _modal_for(self, name: str) -> Callable[[], None]:
        def open_modal() -> None:
            d = self.driver
            patient = self.patients[name]
            d.remove(nurse.SUCCESS_MESSAGE)
            d.place(doctor.MODAL_TITLE, text=name)
            d.place(doctor.COMMENT_TEXTAREA)
            d.place(doctor.SAVE_COMMENT_BUTTON, on_click=lambda: self._save_comment(name))
            if not patient.doctor:
                d.place(doctor.TAKE_CASE_BUTTON, on_click=lambda: self._take_case(name))
            for button, status in self.PROCESS_BUTTONS:
                d.place(button, on_click=self._status_setter(name, status))
            # Only the labelled select is rendered, so the primary status select misses.
            d.place(STATUS_SELECT, text=patient.status)
            d.place(doctor.UPDATE_STATUS_BUTTON, on_click=lambda: self._update_from_select(name))

        return open_modal

    def _status_setter(self, name: str, status: str) -> Callable[[], None]:
        return lambda: self._set_status(name, status)

    def _close_modal(self) -> None:
        for target in (
            doctor.MODAL_TITLE,
            doctor.COMMENT_TEXTAREA,
            doctor.SAVE_COMMENT_BUTTON,
            doctor.TAKE_CASE_BUTTON,
            doctor.HOSPITALIZE_BUTTON,
            doctor.DISCHARGE_BUTTON,
            doctor.TRANSFER_BUTTON,
            doctor.ICU_BUTTON,
            STATUS_SELECT,
            doctor.UPDATE_STATUS_BUTTON,
        ):
            self.driver.remove(target)

    def _toast(self, text: str) -> None:
        self.driver.remove(nurse.SUCCESS_MESSAGE)
        self.driver.place(nurse.SUCCESS_MESSAGE, text=text)

    def _take_case(self, name: str) -> None:
        patient = self.patients[name]
        comment = self.driver.element(doctor.COMMENT_TEXTAREA).value
        if comment:
            patient.comments.append(comment)
        patient.doctor = "carlos.mendoza@healthtech.com"
        patient.status = "En atención"
        self._close_modal()
        self.driver.element(doctor.PATIENT_STATUS.of(name)).text_value = patient.status
        self._toast("Caso asignado con éxito")

    def _save_comment(self, name: str) -> None:
        self.patients[name].comments.append(self.driver.element(doctor.COMMENT_TEXTAREA).value)
        self._close_modal()
        self._toast("Comentario agregado exitosamente")

    def _update_from_select(self, name: str) -> None:
        self._set_status(name, self.driver.element(STATUS_SELECT).selected)

    def _set_status(self, name: str, status: str) -> None:
        self.patients[name].status = status
        self._close_modal()
        self.driver.element(doctor.PATIENT_STATUS.of(name)).text_value = status
        self._toast("Proceso actualizado exitosamente")
