"""Video service implementations and the provider registry."""

from functools import partial
from typing import Callable

from embedvideo.config.services.static import load_service_definitions
from embedvideo.services.providers.backends.iframe import IframeVideoService
from embedvideo.services.providers.base import BaseVideoService

# Twitch players refuse to load unless told which site embeds them
TWITCH_SERVICES = frozenset({"twitch", "twitchclip", "twitchvod"})

SERVICE_REGISTRY: dict[str, Callable[[], BaseVideoService]] = {
    name: partial(IframeVideoService, name, definition)
    for name, definition in load_service_definitions().items()
}


def get_video_service(service_name: str) -> BaseVideoService | None:
    """Return a fresh handle for the given provider name, or None if unknown."""
    factory = SERVICE_REGISTRY.get(service_name)
    if factory is None:
        return None
    return factory()


def list_service_names() -> list[str]:
    """Registered provider names, sorted."""
    return sorted(SERVICE_REGISTRY)
