"""
Argument resolution: raw arguments → validated EmbedConfig plus a configured provider handle.

Validation is fail-fast; the first failing check decides the error kind:
missingparams, service, id, urlargs, container, alignment, valignment.
"""

from collections.abc import Callable, Sequence
from typing import NamedTuple

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.config.logging import get_logger
from embedvideo.services.embed.arguments import FIELD_SCHEMA, parse_embed_args
from embedvideo.services.embed.errors import EmbedError
from embedvideo.services.embed.host import InlineRenderer
from embedvideo.services.embed.models import (
    ALIGNMENTS,
    CONTAINERS,
    VERTICAL_ALIGNMENTS,
    EmbedConfig,
)
from embedvideo.services.providers.backends import TWITCH_SERVICES, get_video_service
from embedvideo.services.providers.base import BaseVideoService
from embedvideo.utils.numeric import is_numeric, to_int
from embedvideo.utils.querystring import set_query_param

logger = get_logger(__name__)

# Named arguments read by the resolver besides the positional schema
_NAMED_ONLY = frozenset({"container"})


class ResolvedEmbed(NamedTuple):
    config: EmbedConfig
    service: BaseVideoService


def _text(value: object) -> str:
    if value is None or value is False:
        return ""
    return str(value)


def _enabled(value: object) -> bool:
    """Flag semantics of a wiki argument: empty, "0" and False switch it off."""
    if isinstance(value, bool):
        return value
    return _text(value).strip() not in ("", "0")


def split_dimensions(
    dimensions: str, width: object, height: object
) -> tuple[object, object]:
    """
    Apply a `dimensions` argument over explicit width/height. "WxH", "Wx" and "xH"
    replace both axes (an empty side means omitted; anything past a second "x" is dropped);
    a plain number replaces the width only.
    """
    if "x" in dimensions.lower():
        w, h = dimensions.lower().split("x")[:2]
        return (w or None), (h or None)
    if is_numeric(dimensions):
        return dimensions, height
    return width, height


def add_twitch_parent(service: str, url_args: str, server_name: str) -> str:
    """Twitch players need the embedding host as `parent`; other providers pass through."""
    if service not in TWITCH_SERVICES:
        return url_args
    if not url_args:
        return f"parent={server_name}"
    return set_query_param(url_args, "parent", server_name)


def _check_vocabulary(kind: str, value: str, allowed: tuple[str, ...]) -> str | None:
    if not value:
        return None
    if value not in allowed:
        raise EmbedError(kind, value)
    return value


class ArgumentResolver:
    """
    Resolves one embed request. The inline renderer is optional: without it the
    description is kept as plain text.
    """

    def __init__(
        self,
        config: EmbedVideoConfig,
        renderer: InlineRenderer | None = None,
        service_factory: Callable[[str], BaseVideoService | None] = get_video_service,
    ):
        self.config = config
        self.renderer = renderer
        self.service_factory = service_factory

    def resolve(self, raw_args: Sequence[str]) -> ResolvedEmbed:
        """Return the resolved config and configured handle. Raises EmbedError on the first failure."""
        service_name, args = parse_embed_args(raw_args)

        video_id = _text(args["id"])
        width, height = split_dimensions(_text(args["dimensions"]), args["width"], args["height"])

        if not service_name or not video_id:
            raise EmbedError("missingparams", service_name, video_id)

        service = self.service_factory(service_name)
        if service is None:
            raise EmbedError("service", service_name)

        requested_width = to_int(width)
        requested_height = to_int(height)
        service.set_width(requested_width)
        service.set_height(requested_height)

        if not service.set_video_id(video_id):
            raise EmbedError("id", service_name, video_id)

        url_args = add_twitch_parent(service_name, _text(args["urlArgs"]), self.config.server_name)
        if not service.set_url_args(url_args):
            raise EmbedError("urlargs", service_name, url_args)

        description = self._render_description(_text(args["description"]))

        container = _check_vocabulary("container", _text(args.get("container")), CONTAINERS)
        alignment = _check_vocabulary("alignment", _text(args["alignment"]), ALIGNMENTS)
        vertical_alignment = _check_vocabulary(
            "valignment", _text(args["vAlignment"]), VERTICAL_ALIGNMENTS
        )
        if vertical_alignment is not None and vertical_alignment != "baseline":
            alignment = "inline"

        extra = {
            k: _text(v) for k, v in args.items() if k not in FIELD_SCHEMA and k not in _NAMED_ONLY
        }
        if extra:
            logger.debug("Ignoring unknown embed arguments", extra={"arguments": sorted(extra)})

        config = EmbedConfig(
            service=service_name,
            id=video_id,
            width=requested_width,
            height=requested_height,
            alignment=alignment,
            vertical_alignment=vertical_alignment,
            container=container,
            url_args=url_args,
            description=description,
            auto_resize=_enabled(args["autoResize"]),
            extra=extra,
        )
        return ResolvedEmbed(config=config, service=service)

    def _render_description(self, description: str) -> str | None:
        if not description:
            return None
        if self.renderer is None:
            return description
        return self.renderer.render_inline(description)
