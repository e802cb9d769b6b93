"""Doctor dashboard and the patient actions modal.

Selectors that matched two genuinely different controls with one XPath union
are declared as fallback chains instead, so the control actually used is
visible in logs and failures.
"""

from screenplay.core.locator import Target

# ── Header ──

DASHBOARD_TITLE = Target.the("doctor dashboard title").located_by(
    "//h1[contains(text(), 'Dashboard Médico')]"
)
WELCOME_MESSAGE = Target.the("welcome message").located_by("//p[contains(text(), 'Bienvenido')]")
LOGOUT_BUTTON = Target.the("logout button").located_by("//button[contains(., 'Cerrar Sesión')]")
NOTIFICATION_BELL = Target.the("notification bell").located_by(
    "//button[contains(@class, 'relative')]//*[name()='svg']"
)

# ── Stats ──

TOTAL_PATIENTS_STAT = Target.the("total patients stat").located_by(
    "//p[contains(text(), 'Total Pacientes')]/following-sibling::p"
)
MY_PATIENTS_STAT = Target.the("my patients stat").located_by(
    "//p[contains(text(), 'Mis Pacientes')]/following-sibling::p"
)
CRITICAL_PATIENTS_STAT = Target.the("critical patients stat").located_by(
    "//p[contains(text(), 'Críticos')]/following-sibling::p"
)
AVG_WAIT_TIME_STAT = Target.the("average wait time stat").located_by(
    "//p[contains(text(), 'Tiempo Prom')]/following-sibling::p"
)

# ── Filters ──

SEARCH_INPUT = Target.the("search input").located_by("//input[contains(@placeholder, 'Buscar')]")
PRIORITY_FILTER = Target.the("priority filter select").located_by(
    "//select[contains(., 'Todas las prioridades')]"
)
STATUS_FILTER = Target.the("status filter select").located_by(
    "//select[contains(., 'Todos los estados')]"
)

# ── Patient list ──

PATIENT_LIST = Target.the("patient list container").located_by(
    "//div[contains(@class, 'space-y-3')]"
)
PATIENT_CARDS = Target.the("patient cards").located_by(
    "//div[contains(@class, 'cursor-pointer')][.//h3]"
)
PATIENT_CARD = Target.the("patient card for {0}").located_by(
    "//h3[contains(text(), {0})]/ancestor::div[contains(@class, 'cursor-pointer')]"
)
VIEW_DETAILS_BUTTON = Target.the("view details button for {0}").located_by(
    "//h3[contains(text(), {0})]/ancestor::div//button[contains(., 'Ver Detalles')]"
)
PATIENT_STATUS = Target.the("status badge for {0}").located_by(
    "//h3[contains(text(), {0})]/following-sibling::*[contains(@class, 'badge')]"
)
PATIENT_PRIORITY = Target.the("priority badge for {0}").located_by(
    "//h3[contains(text(), {0})]/parent::div//span[contains(., 'P')]"
)

# ── Patient actions modal ──

MODAL_TITLE = (
    Target.the("modal title")
    .located_by("//div[contains(@class, 'modal')]//h2")
    .or_else(Target.the("dialog title").located_by("//div[contains(@role, 'dialog')]//h2"))
)
TAKE_CASE_BUTTON = Target.the("take case button").located_by(
    "//button[contains(., 'Tomar Caso') or contains(., 'Asignarme')]"
)
ADD_COMMENT_BUTTON = Target.the("add comment button").located_by(
    "//button[contains(., 'Agregar Comentario') or contains(., 'Comentario')]"
)
COMMENT_TEXTAREA = Target.the("comment textarea").located_by_css("textarea")
SAVE_COMMENT_BUTTON = (
    Target.the("save comment button")
    .located_by("//button[contains(., 'Guardar') and contains(., 'Comentario')]")
    .or_else(Target.the("add button").located_by("//button[contains(., 'Agregar')]"))
)
CLOSE_MODAL_BUTTON = Target.the("close modal button").located_by(
    "//button[contains(@class, 'close') or contains(., '×') or @aria-label='Close']"
)

# ── Process update ──

PROCESS_SELECT = (
    Target.the("process select dropdown")
    .located_by("//select[contains(@name, 'status') or contains(@id, 'status')]")
    .or_else(
        Target.the("select labelled Estado").located_by(
            "//label[contains(text(), 'Estado')]/following::select[1]"
        )
    )
)
UPDATE_STATUS_BUTTON = Target.the("update status button").located_by(
    "//button[contains(., 'Actualizar') and contains(., 'Estado')]"
)
DISCHARGE_BUTTON = Target.the("discharge patient button").located_by(
    "//button[contains(., 'Dar de Alta')]"
)
HOSPITALIZE_BUTTON = Target.the("hospitalize button").located_by(
    "//button[contains(., 'Hospitalizar')]"
)
TRANSFER_BUTTON = Target.the("transfer button").located_by(
    "//button[contains(., 'Transferir') or contains(., 'Remitir')]"
)
ICU_BUTTON = Target.the("ICU button").located_by("//button[contains(., 'UCI')]")

# ── Messages ──

SUCCESS_MESSAGE = Target.the("success message").located_by(
    "//*[contains(@class, 'toast') or contains(@class, 'success')]"
    "[contains(., 'exitosamente') or contains(., 'éxito')]"
)
ERROR_MESSAGE = Target.the("error message").located_by(
    "//*[contains(@class, 'toast') or contains(@class, 'error')]"
    "[contains(., 'error') or contains(., 'Error')]"
)
EMPTY_STATE = Target.the("empty state message").located_by(
    "//h3[contains(text(), 'No hay pacientes')]"
)
