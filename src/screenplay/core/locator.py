"""Locators and Targets.

A Target is a named, immutable Locator factory. Templates mark parameter
slots with ``{0}``, ``{1}``, ... and every parameter is encoded as a literal
of the template's query language before substitution, so caller-supplied
text (patient names, comments) can never change the shape of the query.

    PATIENT_CARD = Target.the("patient card for {0}").located_by(
        "//h3[contains(text(), {0})]/ancestor::div[contains(@class, 'cursor-pointer')]"
    )
    PATIENT_CARD.locate("O'Brien")  # -> ... contains(text(), "O'Brien") ...
"""

from __future__ import annotations

import re
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from screenplay.core.exceptions import LocatorError
from screenplay.core.models import LocatorStrategy

_PLACEHOLDER = re.compile(r"\{(\d+)\}")
# C0 controls other than tab, LF and CR have no literal form in XPath 1.0.
_FORBIDDEN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def xpath_literal(value: str) -> str:
    """Encode a string as an XPath 1.0 string literal.

    XPath has no escape sequences: a value containing only one kind of quote
    is wrapped in the other, a value containing both is split into a
    ``concat()`` of single-quoted pieces and ``"'"`` separators.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    pieces: list[str] = []
    for index, part in enumerate(value.split("'")):
        if index:
            pieces.append("\"'\"")
        if part:
            pieces.append(f"'{part}'")
    return f"concat({', '.join(pieces)})"


def css_string(value: str) -> str:
    """Encode a string as a double-quoted CSS string."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\a ")
        .replace("\r", "\\d ")
    )
    return f'"{escaped}"'


_ENCODERS = {
    LocatorStrategy.XPATH: xpath_literal,
    LocatorStrategy.CSS: css_string,
}


def _template_arity(template: str) -> int:
    indices = {int(m) for m in _PLACEHOLDER.findall(template)}
    if indices != set(range(len(indices))):
        msg = f"Placeholders must be numbered from {{0}} without gaps: {template!r}"
        raise LocatorError(msg)
    return len(indices)


def _coerce_parameter(value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        msg = f"Locator parameters must be text or numbers, got {type(value).__name__}"
        raise LocatorError(msg)
    text = str(value)
    if _FORBIDDEN.search(text):
        msg = f"Locator parameter contains a control character: {text!r}"
        raise LocatorError(msg)
    return text


def _fill(
    template: str, values: tuple[str, ...], encode: Callable[[str], str] | None = None
) -> str:
    def replace(match: re.Match[str]) -> str:
        value = values[int(match.group(1))]
        return encode(value) if encode is not None else value

    return _PLACEHOLDER.sub(replace, template)


class Locator(BaseModel):
    """A concrete query plus the parameters substituted into it."""

    model_config = ConfigDict(frozen=True)

    strategy: LocatorStrategy
    template: str = Field(..., min_length=1)
    parameters: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_parameters(self) -> Locator:
        arity = _template_arity(self.template)
        if arity != len(self.parameters):
            msg = (
                f"Template expects {arity} parameter(s), got {len(self.parameters)}: "
                f"{self.template!r}"
            )
            raise LocatorError(msg)
        for value in self.parameters:
            _coerce_parameter(value)
        return self

    @property
    def query(self) -> str:
        """The template with every parameter encoded for the query language."""
        return _fill(self.template, self.parameters, _ENCODERS[self.strategy])

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.query}"


class Target(BaseModel):
    """Named, reusable Locator factory. Parameterized when its template has slots."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    template: str = Field(..., min_length=1)
    strategy: LocatorStrategy = LocatorStrategy.XPATH
    parameters: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_template(self) -> Target:
        arity = _template_arity(self.template)
        if self.parameters and len(self.parameters) != arity:
            msg = f"Target '{self.name}' expects {arity} parameter(s)"
            raise LocatorError(msg)
        if not self.parameters:
            extra = {int(m) for m in _PLACEHOLDER.findall(self.name)} - set(range(arity))
            if extra:
                msg = (
                    f"Target '{self.name}' names placeholder(s) {sorted(extra)} "
                    f"beyond its template's {arity} parameter(s)"
                )
                raise LocatorError(msg)
        return self

    @classmethod
    def the(cls, name: str) -> TargetBuilder:
        """Start a Target definition: ``Target.the("login button").located_by(...)``."""
        return TargetBuilder(name)

    @property
    def arity(self) -> int:
        return _template_arity(self.template)

    @property
    def is_bound(self) -> bool:
        return len(self.parameters) == self.arity

    def of(self, *params: str | int | float) -> Target:
        """Bind parameters, returning a concrete Target with a readable name."""
        if self.parameters:
            msg = f"Target '{self.name}' is already bound"
            raise LocatorError(msg)
        values = tuple(_coerce_parameter(p) for p in params)
        if len(values) != self.arity:
            msg = f"Target '{self.name}' expects {self.arity} parameter(s), got {len(values)}"
            raise LocatorError(msg)
        return Target(
            name=_fill(self.name, values),
            template=self.template,
            strategy=self.strategy,
            parameters=values,
        )

    def locator(self) -> Locator:
        if not self.is_bound:
            msg = f"Target '{self.name}' needs {self.arity} parameter(s) before it can be located"
            raise LocatorError(msg)
        return Locator(strategy=self.strategy, template=self.template, parameters=self.parameters)

    def locate(self, *params: str | int | float) -> Locator:
        """Pure function of the parameters: equal parameters give equal Locators."""
        return self.of(*params).locator() if params else self.locator()

    def or_else(self, *fallbacks: Target) -> FallbackChain:
        return FallbackChain(targets=(self, *fallbacks))

    def describe(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class TargetBuilder:
    def __init__(self, name: str) -> None:
        self._name = name

    def located_by(self, xpath: str) -> Target:
        return Target(name=self._name, template=xpath, strategy=LocatorStrategy.XPATH)

    def located_by_css(self, css: str) -> Target:
        return Target(name=self._name, template=css, strategy=LocatorStrategy.CSS)


class FallbackChain(BaseModel):
    """Ordered Targets tried in sequence; the first that resolves wins."""

    model_config = ConfigDict(frozen=True)

    targets: tuple[Target, ...] = Field(..., min_length=1)

    @classmethod
    def of(cls, target: Target | FallbackChain) -> FallbackChain:
        if isinstance(target, FallbackChain):
            return target
        return cls(targets=(target,))

    @property
    def primary(self) -> Target:
        return self.targets[0]

    def or_else(self, *fallbacks: Target) -> FallbackChain:
        return FallbackChain(targets=(*self.targets, *fallbacks))

    def describe(self) -> str:
        return " or else ".join(t.describe() for t in self.targets)

    def __str__(self) -> str:
        return self.describe()
