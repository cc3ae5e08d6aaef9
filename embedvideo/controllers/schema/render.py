"""Request/response schemas for POST /render and GET /services."""

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """POST /render request body. `args[0]` is the provider name, as in `{{#ev:...}}`."""

    args: list[str] = Field(..., max_length=64, description="Raw parser-function arguments")
    plain_text: bool = Field(
        default=False,
        description="Render without a host: caption kept verbatim, no resources declared",
    )


class RenderResponse(BaseModel):
    """POST /render response body."""

    html: str = Field(..., description="Embed markup or an inline error box")
    noparse: bool = Field(default=True)
    is_html: bool = Field(default=True)
    modules: list[str] = Field(default_factory=list, description="Declared script modules")
    module_styles: list[str] = Field(default_factory=list, description="Declared style modules")


class ServicesResponse(BaseModel):
    """GET /services response body."""

    services: list[str] = Field(default_factory=list, description="Registered provider names")
    enabled_services: list[str] | None = Field(
        default=None, description="Active allow-list; null or empty means all are enabled"
    )
