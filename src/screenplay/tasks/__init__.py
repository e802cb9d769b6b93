"""Tasks and Interactions."""

from screenplay.tasks.base import Interaction, Performable, Task, included_if
from screenplay.tasks.interactions import (
    Clear,
    Click,
    Enter,
    Open,
    Pause,
    SelectFromOptions,
    WaitUntil,
)
from screenplay.tasks.wizard import Wizard, WizardStep

__all__ = [
    "Clear",
    "Click",
    "Enter",
    "Interaction",
    "Open",
    "Pause",
    "Performable",
    "SelectFromOptions",
    "Task",
    "WaitUntil",
    "Wizard",
    "WizardStep",
    "included_if",
]
