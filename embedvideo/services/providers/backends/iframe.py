"""Iframe video service driven by a static ServiceDefinition."""

import html
import re
from urllib.parse import quote, urlencode

from embedvideo.config.services.models import ServiceDefinition
from embedvideo.services.providers.base import BaseVideoService
from embedvideo.utils.querystring import append_query, parse_query


class IframeVideoService(BaseVideoService):
    """
    Renders a provider player as an iframe. Id validation, default sizes and
    URL-argument policy all come from the definition.
    """

    def __init__(self, name: str, definition: ServiceDefinition):
        self._name = name
        self._definition = definition
        self._width = definition.default_width
        self._height: int | None = None
        self._id: str | None = None
        self._url_args = ""

    @property
    def name(self) -> str:
        return self._name

    def set_width(self, width: int | None) -> None:
        d = self._definition
        if width is None or width <= 0:
            width = d.default_width
        if d.min_width is not None and width < d.min_width:
            width = d.min_width
        if d.max_width is not None and width > d.max_width:
            width = d.max_width
        self._width = width

    def set_height(self, height: int | None) -> None:
        self._height = height if height is not None and height > 0 else None

    def set_video_id(self, video_id: str) -> bool:
        candidate = (video_id or "").strip()
        if not candidate:
            return False
        for pattern in self._definition.extract_patterns:
            match = re.search(pattern, candidate)
            if match:
                candidate = match.group(1)
                break
        patterns = self._definition.id_patterns
        if patterns and not any(re.fullmatch(p, candidate) for p in patterns):
            return False
        self._id = candidate
        return True

    def set_url_args(self, url_args: str) -> bool:
        if not url_args:
            self._url_args = ""
            return True
        if not self._definition.url_args:
            return False
        params = parse_query(url_args)
        if not params:
            return False
        self._url_args = urlencode(params)
        return True

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        if self._height is not None:
            return self._height
        if self._definition.default_height is not None:
            return self._definition.default_height
        return round(self._width / self._definition.default_ratio)

    def get_id(self) -> str | None:
        return self._id

    def get_url_args(self) -> str:
        return self._url_args

    def get_src(self) -> str | None:
        """Player URL with the id and URL arguments applied."""
        if self._id is None:
            return None
        url = self._definition.embed_url.format(id=quote(self._id, safe=""))
        return append_query(url, self._url_args)

    def get_html(self) -> str | None:
        src = self.get_src()
        if src is None:
            return None
        return (
            f'<iframe class="embedvideo-player" src="{html.escape(src, quote=True)}" '
            f'width="{self.get_width()}" height="{self.get_height()}" frameborder="0" '
            f'loading="lazy" allow="{html.escape(self._definition.allow, quote=True)}" '
            f'allowfullscreen="true"></iframe>'
        )
