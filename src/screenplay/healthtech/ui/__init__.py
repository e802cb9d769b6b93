"""Locator catalogs for the HealthTech triage UI.

CATALOG maps a page name to its Targets (and fallback chains) by constant name.
"""

from __future__ import annotations

from types import ModuleType

from screenplay.core.locator import FallbackChain, Target
from screenplay.healthtech.ui import doctor_dashboard, login_page, nurse_dashboard


def _targets(module: ModuleType) -> dict[str, Target | FallbackChain]:
    return {
        name: value
        for name, value in vars(module).items()
        if name.isupper() and isinstance(value, (Target, FallbackChain))
    }


CATALOG: dict[str, dict[str, Target | FallbackChain]] = {
    "login": _targets(login_page),
    "nurse": _targets(nurse_dashboard),
    "doctor": _targets(doctor_dashboard),
}

__all__ = ["CATALOG", "doctor_dashboard", "login_page", "nurse_dashboard"]
