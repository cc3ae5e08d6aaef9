"""Embed policy configuration model. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class EmbedVideoConfig(BaseModel):
    """Process-wide embed policy handed to the resolver, assembler and renderer."""

    model_config = ConfigDict(frozen=True)

    enabled_services: list[str] | None = Field(
        default=None, description="Allowed provider names; None or empty means unrestricted"
    )
    require_consent: bool = Field(default=False, description="Inject the consent overlay")
    fetch_external_thumbnails: bool = Field(
        default=True, description="When false, the inner wrapper gets the no-fetch class"
    )
    server_name: str = Field(default="localhost", description="Injected as Twitch parent")
