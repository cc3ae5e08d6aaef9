"""POST /render: resolve embed arguments and return the wrapper HTML. GET /services: list providers."""

from fastapi import APIRouter

from embedvideo.config.embedvideo.static import get_embedvideo_config
from embedvideo.config.messages.static import get_message_catalog
from embedvideo.controllers.schema.render import RenderRequest, RenderResponse, ServicesResponse
from embedvideo.services.embed.host import PlainTextHost
from embedvideo.services.embed.pipeline import EmbedVideoRenderer
from embedvideo.services.providers.backends import list_service_names

router = APIRouter(tags=["embed"])


@router.post("/render", response_model=RenderResponse)
async def render_embed(body: RenderRequest) -> RenderResponse:
    """
    Render one embed. Invalid arguments are not an HTTP error: the response carries
    the inline error box the page would show.
    """
    host = None if body.plain_text else PlainTextHost()
    renderer = EmbedVideoRenderer(get_embedvideo_config(), get_message_catalog(), host=host)
    output = renderer.render([arg.strip() for arg in body.args])
    return RenderResponse(
        html=output.html,
        noparse=output.noparse,
        is_html=output.is_html,
        modules=host.output.modules if host else [],
        module_styles=host.output.module_styles if host else [],
    )


@router.get("/services", response_model=ServicesResponse)
async def list_services() -> ServicesResponse:
    """Registered providers and the allow-list currently applied."""
    return ServicesResponse(
        services=list_service_names(),
        enabled_services=get_embedvideo_config().enabled_services,
    )
