"""Video service definitions. Read-only; no business logic."""

from pydantic import BaseModel, Field, model_validator


class ServiceDefinition(BaseModel):
    """How one provider turns a video id into an iframe."""

    embed_url: str = Field(..., min_length=1, description="Player URL with an {id} placeholder")
    id_patterns: list[str] = Field(default_factory=list, description="Full-match patterns for a valid id")
    extract_patterns: list[str] = Field(
        default_factory=list, description="Patterns with one group pulling the id out of a pasted URL"
    )
    default_width: int = Field(default=640, ge=1)
    default_ratio: float = Field(default=16 / 9, gt=0)
    default_height: int | None = Field(default=None, ge=1, description="Fixed height; overrides the ratio")
    min_width: int | None = Field(default=None, ge=1)
    max_width: int | None = Field(default=None, ge=1)
    url_args: bool = Field(default=True, description="Whether extra URL arguments are accepted")
    allow: str = Field(
        default="accelerometer; clipboard-write; encrypted-media; fullscreen; picture-in-picture",
        description="iframe allow attribute",
    )

    @model_validator(mode="after")
    def validate_embed_url(self):
        """The embed URL must contain the id placeholder."""
        if "{id}" not in self.embed_url:
            raise ValueError("embed_url must contain an {id} placeholder")
        if self.min_width and self.max_width and self.min_width > self.max_width:
            raise ValueError("min_width cannot exceed max_width")
        return self
