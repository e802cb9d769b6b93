"""HealthTech domain Questions."""

from screenplay.healthtech.questions.the_dashboard import TheDashboard
from screenplay.healthtech.questions.the_patient import ThePatient

__all__ = ["TheDashboard", "ThePatient"]
