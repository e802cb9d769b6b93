"""Multi-step form workflows.

A Wizard is a linear state machine Step1 -> ... -> StepN -> Submitted. Each
step waits for its landmark, performs its fills, and (except the last) waits
for the advance control before clicking it. After the last step the submit
control is awaited and clicked. There are no backward transitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from screenplay.core.models import WaitProfile
from screenplay.tasks.base import Performable, Steps, Task, flatten
from screenplay.tasks.interactions import Click, WaitUntil

if TYPE_CHECKING:
    from screenplay.actors.actor import Actor
    from screenplay.core.locator import FallbackChain, Target


@dataclass(frozen=True)
class WizardStep:
    title: str
    landmark: Target | FallbackChain
    fills: tuple[Performable, ...] = ()

    @classmethod
    def of(cls, title: str, landmark: Target | FallbackChain, *fills: Steps) -> WizardStep:
        return cls(title, landmark, flatten(fills))


@dataclass(frozen=True)
class Wizard(Performable):
    title: str
    steps: tuple[WizardStep, ...]
    advance: Target | FallbackChain
    submit: Target | FallbackChain
    landmark_timeout: float | WaitProfile = WaitProfile.ELEMENT
    control_timeout: float | WaitProfile = WaitProfile.CONTROL

    def __post_init__(self) -> None:
        if not self.steps:
            msg = f"Wizard '{self.title}' needs at least one step"
            raise ValueError(msg)

    def as_task(self) -> Task:
        """Expand into the equivalent Task of nested per-step Tasks."""
        total = len(self.steps)
        parts: list[Performable] = []
        for index, step in enumerate(self.steps, start=1):
            body = Task.where(
                f"step {index}/{total}: {step.title}",
                WaitUntil.visible(step.landmark, self.landmark_timeout),
                step.fills,
            )
            if index < total:
                body = body.then(
                    WaitUntil.clickable(self.advance, self.control_timeout),
                    Click.on(self.advance),
                )
            parts.append(body)
        parts.append(
            Task.where(
                f"submit {self.title}",
                WaitUntil.clickable(self.submit, self.control_timeout),
                Click.on(self.submit),
            )
        )
        return Task(f"complete {self.title}", tuple(parts))

    def describe(self) -> str:
        return f"complete {self.title} ({len(self.steps)} steps)"

    async def perform_as(self, actor: Actor) -> None:
        await self.as_task().perform_as(actor)
