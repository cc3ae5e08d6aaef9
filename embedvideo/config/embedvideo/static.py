"""Build the embed policy from application settings. Read-only; no business logic."""

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.config.settings import Settings, get_settings


def embedvideo_config_from_settings(settings: Settings) -> EmbedVideoConfig:
    """Map environment settings onto the embed policy model."""
    return EmbedVideoConfig(
        enabled_services=settings.embedvideo_enabled_services,
        require_consent=settings.embedvideo_require_consent,
        fetch_external_thumbnails=settings.embedvideo_fetch_external_thumbnails,
        server_name=settings.server_name,
    )


def get_embedvideo_config() -> EmbedVideoConfig:
    """Return the embed policy for the cached application settings."""
    return embedvideo_config_from_settings(get_settings())
