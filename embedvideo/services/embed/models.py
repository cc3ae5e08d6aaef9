"""Resolved embed configuration and render output models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Alignment = Literal["left", "right", "center", "inline"]
VerticalAlignment = Literal["top", "middle", "bottom", "baseline"]
Container = Literal["frame"]

ALIGNMENTS: tuple[str, ...] = ("left", "right", "center", "inline")
VERTICAL_ALIGNMENTS: tuple[str, ...] = ("top", "middle", "bottom", "baseline")
CONTAINERS: tuple[str, ...] = ("frame",)


class EmbedConfig(BaseModel):
    """One embed after argument resolution. Built once validation has passed; read-only after."""

    model_config = ConfigDict(frozen=True)

    service: str = Field(..., min_length=1, description="Provider name")
    id: str = Field(..., min_length=1, description="Video id as supplied")
    width: int | None = Field(default=None, description="Requested width, None when omitted")
    height: int | None = Field(default=None, description="Requested height, None when omitted")
    alignment: Alignment | None = None
    vertical_alignment: VerticalAlignment | None = None
    container: Container | None = None
    url_args: str = Field(default="", description="Query string handed to the provider")
    description: str | None = Field(default=None, description="Caption markup; None renders no caption")
    auto_resize: bool = True
    extra: dict[str, str] = Field(default_factory=dict, description="Named arguments nothing reads")


class EmbedOutput(BaseModel):
    """What the host receives: literal HTML that must not be parsed again."""

    model_config = ConfigDict(frozen=True)

    html: str
    noparse: bool = True
    is_html: bool = True
