"""Wrap provider markup in the embed containers: alignment, frame, consent overlay and caption."""

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.config.messages.static import MessageCatalog
from embedvideo.services.embed.models import EmbedConfig
from embedvideo.services.providers.base import BaseVideoService

# Extra pixels around the player: the aligned inner box and the outer thumb box
ALIGNED_WIDTH_PAD = 6
OUTER_WIDTH_PAD = 8

AUTO_RESIZE_CLASS = "autoResize"


def _classes(*tokens: str | None) -> str:
    return " ".join(t for t in tokens if t)


def consent_overlay(message: str) -> str:
    """Overlay shown over the player until the reader opts in."""
    return (
        '<div class="embedvideo-consent"><div class="embedvideo-consent__overlay">'
        f'<div class="embedvideo-consent__message">{message}</div></div></div>'
    )


class RenderAssembler:
    """
    Builds three nested containers around the provider markup. Class and style
    tokens come from closed vocabularies; description and provider HTML are
    inserted verbatim.
    """

    def __init__(self, config: EmbedVideoConfig, messages: MessageCatalog):
        self.config = config
        self.messages = messages

    def assemble(self, embed: EmbedConfig, service: BaseVideoService, inner_html: str) -> str:
        width = service.get_width()
        auto_resize = AUTO_RESIZE_CLASS if embed.auto_resize else None

        outer_class = _classes(
            "thumb",
            "embedvideo",
            f"ev_{embed.alignment}" if embed.alignment else None,
            f"ev_{embed.vertical_alignment}" if embed.vertical_alignment else None,
            auto_resize,
        )
        middle_class = _classes(
            "embedvideo",
            "thumbinner" if embed.container == "frame" else None,
            auto_resize,
        )
        middle_style = f"width: {width + ALIGNED_WIDTH_PAD}px;" if embed.alignment else ""
        inner_class = _classes(
            "embedvideowrap",
            embed.service,
            None if self.config.fetch_external_thumbnails else "no-fetch",
        )

        consent = ""
        if self.config.require_consent:
            consent = consent_overlay(self.messages.text("embedvideo_consent_text"))

        lines = [
            f'<div class="{outer_class}" style="width: {width + OUTER_WIDTH_PAD}px;">',
            f'\t<div class="{middle_class}" style="{middle_style}">',
            f'\t\t<div class="{inner_class}" style="width: {width}px;">{consent}{inner_html}</div>',
        ]
        if embed.description is not None:
            lines.append(f'\t\t<div class="thumbcaption">{embed.description}</div>')
        lines += ["\t</div>", "</div>"]
        return "\n".join(lines)
