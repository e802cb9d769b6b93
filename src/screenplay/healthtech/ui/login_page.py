"""Login page."""

from screenplay.core.locator import Target

EMAIL_INPUT = Target.the("email input field").located_by_css("input[type='email']")
PASSWORD_INPUT = Target.the("password input field").located_by_css("input[type='password']")
LOGIN_BUTTON = Target.the("login button").located_by_css("button[type='submit']")

PAGE_TITLE = Target.the("HealthTech title").located_by(
    "//h1[contains(text(), 'HealthTech')] | //h1[contains(@class, 'text-transparent')]"
)
LOGIN_HEADING = Target.the("login heading").located_by("//h3[contains(text(), 'Iniciar Sesión')]")

ERROR_MESSAGE = Target.the("error message").located_by(
    "//*[contains(@class, 'error') or contains(@class, 'alert')]"
)
SUCCESS_MESSAGE = Target.the("success message").located_by("//*[contains(@class, 'success')]")
