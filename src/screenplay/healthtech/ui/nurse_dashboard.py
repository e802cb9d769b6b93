"""Nurse dashboard and the three-step patient registration form."""

from screenplay.core.locator import Target

# ── Header ──

DASHBOARD_TITLE = Target.the("nurse dashboard title").located_by(
    "//h1[contains(text(), 'Dashboard de Enfermería')]"
)
WELCOME_MESSAGE = Target.the("welcome message").located_by("//p[contains(text(), 'Bienvenido')]")
LOGOUT_BUTTON = Target.the("logout button").located_by("//button[contains(., 'Cerrar Sesión')]")

# ── Stats ──

TOTAL_PATIENTS_CARD = Target.the("total patients card").located_by(
    "//p[contains(text(), 'Total Pacientes')]/following-sibling::p"
)
CRITICAL_PATIENTS_CARD = Target.the("critical patients card").located_by(
    "//p[contains(text(), 'Críticos')]/following-sibling::p"
)

REGISTER_PATIENT_BUTTON = Target.the("register new patient button").located_by(
    "//button[contains(., 'Registrar Nuevo Paciente')]"
)

# ── Registration step 1: personal information ──

PATIENT_NAME_INPUT = Target.the("patient name input").located_by(
    "//input[contains(@placeholder, 'Pérez') or @name='name']"
)
PATIENT_AGE_INPUT = Target.the("patient age input").located_by(
    "//input[@type='number' and contains(@placeholder, '30')]"
)
PATIENT_GENDER_SELECT = Target.the("patient gender select").located_by_css("select")
PATIENT_ID_INPUT = Target.the("patient identification input").located_by(
    "//input[contains(@placeholder, 'DNI') or contains(@placeholder, 'Pasaporte')]"
)
ADDRESS_INPUT = Target.the("address input").located_by("//input[contains(@placeholder, 'Calle')]")
PHONE_INPUT = Target.the("phone input").located_by("//input[contains(@placeholder, '+34 123')]")
EMERGENCY_CONTACT_INPUT = Target.the("emergency contact input").located_by(
    "//input[contains(@placeholder, 'Nombre del contacto')]"
)
EMERGENCY_PHONE_INPUT = Target.the("emergency phone input").located_by(
    "//input[contains(@placeholder, '+34 987')]"
)

# ── Registration step 2: symptoms and vital signs ──

SYMPTOMS_TEXTAREA = Target.the("symptoms textarea").located_by(
    "//textarea[contains(@placeholder, 'Describa los síntomas')]"
)


def _vital_sign(name: str, label: str, field: str) -> Target:
    return Target.the(name).located_by(
        f"//label[contains(text(), '{label}')]/following::input[1]"
        f" | //input[contains(@name, '{field}')]"
    )


BLOOD_PRESSURE_SYSTOLIC = _vital_sign("systolic blood pressure", "Sistólica", "systolic")
BLOOD_PRESSURE_DIASTOLIC = _vital_sign("diastolic blood pressure", "Diastólica", "diastolic")
HEART_RATE_INPUT = _vital_sign("heart rate input", "Frecuencia Cardíaca", "heartRate")
TEMPERATURE_INPUT = _vital_sign("temperature input", "Temperatura", "temperature")
OXYGEN_SATURATION_INPUT = _vital_sign("oxygen saturation input", "Saturación", "oxygenSaturation")
RESPIRATORY_RATE_INPUT = _vital_sign("respiratory rate input", "Respiratoria", "respiratoryRate")

# ── Registration step 3: priority ──

PRIORITY_BUTTON = Target.the("priority button {0}").located_by(
    "//button[contains(., concat('Nivel ', {0})) or contains(., concat('P', {0}))"
    " or contains(@data-priority, {0})]"
)


def priority_button(priority: str | int) -> Target:
    """Priority button for "P3", "3" or 3."""
    return PRIORITY_BUTTON.of(str(priority).upper().removeprefix("P"))


# ── Form navigation ──

NEXT_BUTTON = Target.the("next step button").located_by("//button[contains(., 'Siguiente')]")
PREVIOUS_BUTTON = Target.the("previous step button").located_by("//button[contains(., 'Anterior')]")
CANCEL_BUTTON = Target.the("cancel button").located_by("//button[contains(., 'Cancelar')]")
SUBMIT_BUTTON = Target.the("register patient button").located_by(
    "//button[contains(., 'Registrar Paciente')]"
)

# ── Patient list ──

PATIENT_LIST = Target.the("patient list container").located_by("//div[contains(@class, 'space-y')]")
PATIENT_ITEM = Target.the("patient card for {0}").located_by(
    "//*[contains(text(), {0})]/ancestor::div[contains(@class, 'card') or contains(@class, 'Card')]"
)

# ── Toasts ──

SUCCESS_MESSAGE = Target.the("success toast message").located_by(
    "//*[contains(@class, 'toast') or contains(@class, 'success') or contains(@class, 'alert')]"
    "[contains(., 'exitosamente') or contains(., 'éxito')]"
)
ERROR_MESSAGE = Target.the("error toast message").located_by(
    "//*[contains(@class, 'toast') or contains(@class, 'error') or contains(@class, 'alert')]"
    "[contains(., 'error') or contains(., 'Error')]"
)
ANY_TOAST = Target.the("any toast notification").located_by(
    "//*[contains(@class, 'toast') or contains(@role, 'alert')]"
)
