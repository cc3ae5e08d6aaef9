import pytest

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.config.messages.static import get_message_catalog
from embedvideo.services.providers.base import BaseVideoService


class StubVideoService(BaseVideoService):
    """Records how it was configured; renders whatever markup it is given."""

    def __init__(self, markup: str | None = "<video></video>", accept_id: bool = True):
        self.markup = markup
        self.accept_id = accept_id
        self.width: int | None = None
        self.height: int | None = None
        self.video_id: str | None = None
        self.url_args = ""

    @property
    def name(self) -> str:
        return "stub"

    def set_width(self, width):
        self.width = width

    def set_height(self, height):
        self.height = height

    def set_video_id(self, video_id):
        if not self.accept_id:
            return False
        self.video_id = video_id
        return True

    def set_url_args(self, url_args):
        self.url_args = url_args
        return True

    def get_width(self):
        return self.width or 640

    def get_height(self):
        return self.height or 360

    def get_id(self):
        return self.video_id

    def get_url_args(self):
        return self.url_args

    def get_html(self):
        return self.markup


@pytest.fixture
def embed_config() -> EmbedVideoConfig:
    return EmbedVideoConfig(server_name="wiki.example.org")


@pytest.fixture
def messages():
    return get_message_catalog()
