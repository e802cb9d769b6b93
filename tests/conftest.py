"""Shared fixtures: a fake driver, a simulated triage app and ready actors."""

from __future__ import annotations

import pytest
from fakes import FakeDriver, TriageApp

from screenplay.actors import Actor, BrowseTheWeb
from screenplay.core.models import Config, TimeoutConfig

FAST_TIMEOUTS = TimeoutConfig(
    element_s=0.2,
    control_s=0.2,
    page_load_s=0.2,
    submit_s=0.2,
    fallback_s=0.05,
    poll_interval_ms=10,
    settle_grace_s=0.0,
)


@pytest.fixture
def config() -> Config:
    return Config(base_url="http://triage.test", timeouts=FAST_TIMEOUTS)


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def actor(driver: FakeDriver, config: Config) -> Actor:
    return Actor.named("Tester").who_can(
        BrowseTheWeb.with_driver(driver, base_url=config.base_url, timeouts=config.timeouts)
    )


@pytest.fixture
def app(driver: FakeDriver) -> TriageApp:
    return TriageApp(driver)
