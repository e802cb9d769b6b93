"""Driver plugin registry."""

from screenplay.engine.web import PlaywrightDriver

DRIVER_REGISTRY: dict[str, type] = {
    "web": PlaywrightDriver,
}
