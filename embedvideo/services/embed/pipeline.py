"""
Embed pipeline: raw parser-function arguments → allow-list check → resolve →
provider markup → wrapper HTML → resource declaration. Every failure becomes an
inline error box; nothing is raised to the host.
"""

from collections.abc import Callable, Sequence

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.config.embedvideo.static import get_embedvideo_config
from embedvideo.config.logging import get_logger
from embedvideo.config.messages.static import MessageCatalog, get_message_catalog
from embedvideo.services.embed.assembler import RenderAssembler
from embedvideo.services.embed.errors import EmbedError, ErrorFormatter
from embedvideo.services.embed.host import BaseEmbedHost
from embedvideo.services.embed.models import EmbedOutput
from embedvideo.services.embed.resolver import ArgumentResolver
from embedvideo.services.providers.backends import get_video_service
from embedvideo.services.providers.base import BaseVideoService

logger = get_logger(__name__)

MODULE = "embedvideo"
MODULE_STYLES = "embedvideo.styles"
MODULE_CONSENT = "embedvideo.consent"


class EmbedVideoRenderer:
    """Renders one embed per call. Without a host, captions stay plain text and no resources are declared."""

    def __init__(
        self,
        config: EmbedVideoConfig,
        messages: MessageCatalog,
        host: BaseEmbedHost | None = None,
        service_factory: Callable[[str], BaseVideoService | None] = get_video_service,
    ):
        self.config = config
        self.host = host
        self.errors = ErrorFormatter(messages)
        self.resolver = ArgumentResolver(config, renderer=host, service_factory=service_factory)
        self.assembler = RenderAssembler(config, messages)

    def render(self, raw_args: Sequence[str]) -> EmbedOutput:
        service_name = raw_args[0].strip() if raw_args else ""

        enabled = self.config.enabled_services
        if enabled and service_name not in enabled:
            logger.info("Embed rejected", extra={"kind": "service", "service": service_name, "disabled": True})
            return self.errors.format("service", f"{service_name} (as it is disabled)")

        try:
            resolved = self.resolver.resolve(raw_args)
        except EmbedError as e:
            logger.info("Embed rejected", extra={"kind": e.kind, "service": service_name})
            return self.errors.from_error(e)

        inner_html = resolved.service.get_html()
        if not inner_html:
            logger.warning("Provider produced no markup", extra={"service": service_name})
            return self.errors.format("unknown", service_name)

        html = self.assembler.assemble(resolved.config, resolved.service, inner_html)
        self._add_modules()
        logger.debug("Embed rendered", extra={"service": service_name, "id": resolved.config.id})
        return EmbedOutput(html=html)

    def _add_modules(self) -> None:
        if self.host is None:
            return
        out = self.host.output
        out.add_modules(MODULE)
        out.add_module_styles(MODULE_STYLES)
        if self.config.require_consent:
            out.add_modules(MODULE_CONSENT)


def parse_ev(raw_args: Sequence[str], host: BaseEmbedHost | None = None) -> EmbedOutput:
    """Entry point for the `#ev` parser function: trims each argument and renders with process-wide config."""
    expanded = [arg.strip() for arg in raw_args]
    renderer = EmbedVideoRenderer(get_embedvideo_config(), get_message_catalog(), host=host)
    return renderer.render(expanded)
