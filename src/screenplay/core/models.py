"""Screenplay data models — Pydantic v2.

This module is a leaf: no internal project imports.
Enums and configuration models live here.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================
# Enums
# ============================================================


class LocatorStrategy(StrEnum):
    """Query language a Locator template is written in."""

    XPATH = "xpath"
    CSS = "css"


class ElementState(StrEnum):
    """Observable element state a wait can target."""

    PRESENT = "present"
    VISIBLE = "visible"
    CLICKABLE = "clickable"
    INVISIBLE = "invisible"


class WaitProfile(StrEnum):
    """Named per-operation timeout class, resolved against TimeoutConfig."""

    ELEMENT = "element"
    CONTROL = "control"
    PAGE_LOAD = "page_load"
    SUBMIT = "submit"
    FALLBACK = "fallback"


# ============================================================
# Config Models
# ============================================================


class EngineConfig(BaseModel):
    """Browser driver configuration."""

    type: str = Field(default="web", description="Driver type, key of DRIVER_REGISTRY")
    browser: str = Field(
        default="chromium",
        description="Browser: chromium | firefox | webkit",
    )
    headless: bool = Field(default=True)
    viewport_width: int = Field(default=1280, ge=320, le=3840)
    viewport_height: int = Field(default=720, ge=240, le=2160)
    timeout_ms: int = Field(default=5000, ge=100, le=120000, description="Per-action timeout")


class TimeoutConfig(BaseModel):
    """Wait timeouts in seconds, one per WaitProfile."""

    element_s: float = Field(default=15.0, gt=0.0, le=600.0)
    control_s: float = Field(default=10.0, gt=0.0, le=600.0)
    page_load_s: float = Field(default=30.0, gt=0.0, le=600.0)
    submit_s: float = Field(default=15.0, gt=0.0, le=600.0)
    fallback_s: float = Field(default=5.0, gt=0.0, le=600.0)
    poll_interval_ms: int = Field(default=250, ge=1, le=10000)
    settle_grace_s: float = Field(default=1.0, ge=0.0, le=10.0)

    @property
    def poll_interval_s(self) -> float:
        return self.poll_interval_ms / 1000

    def seconds_for(self, profile: WaitProfile) -> float:
        """Timeout in seconds for a named wait profile."""
        return float(getattr(self, f"{profile.value}_s"))


class Credentials(BaseModel):
    """Login credentials for one role."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


def default_credentials() -> dict[str, Credentials]:
    return {
        "nurse": Credentials(email="ana.garcia@healthtech.com", password="password123"),
        "doctor": Credentials(email="carlos.mendoza@healthtech.com", password="password123"),
        "admin": Credentials(email="admin@healthtech.com", password="admin123"),
    }


class Config(BaseSettings):
    """Project configuration. Merged from YAML + env var + CLI flag."""

    model_config = SettingsConfigDict(
        env_prefix="SCREENPLAY_",
        env_nested_delimiter="__",
    )

    project_name: str = Field(default="healthtech-e2e")
    base_url: str = Field(default="http://localhost:3003")
    engine: EngineConfig = Field(default_factory=EngineConfig)
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    credentials: dict[str, Credentials] = Field(default_factory=default_credentials)
