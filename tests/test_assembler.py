import pytest

from embedvideo.config.embedvideo.models import EmbedVideoConfig
from embedvideo.services.embed.assembler import RenderAssembler
from embedvideo.services.embed.models import EmbedConfig
from embedvideo.services.providers.backends import get_video_service

YOUTUBE_ID = "dQw4w9WgXcQ"


@pytest.fixture
def service():
    handle = get_video_service("youtube")
    handle.set_width(400)
    handle.set_height(300)
    handle.set_video_id(YOUTUBE_ID)
    return handle


def _assemble(config, messages, service, **fields):
    embed = EmbedConfig(service="youtube", id=YOUTUBE_ID, **fields)
    return RenderAssembler(config, messages).assemble(embed, service, service.get_html())


def test_aligned_wrapper_widths_and_classes(embed_config, messages, service):
    html = _assemble(embed_config, messages, service, alignment="center")
    lines = html.split("\n")
    assert lines[0] == '<div class="thumb embedvideo ev_center autoResize" style="width: 408px;">'
    assert lines[1] == '\t<div class="embedvideo autoResize" style="width: 406px;">'
    assert 'class="embedvideowrap youtube" style="width: 400px;"' in lines[2]


def test_unaligned_wrapper_has_no_inner_width(embed_config, messages, service):
    html = _assemble(embed_config, messages, service)
    assert '<div class="embedvideo autoResize" style="">' in html
    assert 'style="width: 408px;"' in html
    assert "ev_" not in html


def test_vertical_alignment_class(embed_config, messages, service):
    html = _assemble(embed_config, messages, service, alignment="inline", vertical_alignment="top")
    assert 'class="thumb embedvideo ev_inline ev_top autoResize"' in html


def test_frame_container(embed_config, messages, service):
    html = _assemble(embed_config, messages, service, container="frame")
    assert 'class="embedvideo thumbinner autoResize"' in html


def test_auto_resize_disabled(embed_config, messages, service):
    html = _assemble(embed_config, messages, service, auto_resize=False)
    assert "autoResize" not in html


def test_no_fetch_class_when_thumbnails_disabled(messages, service):
    config = EmbedVideoConfig(fetch_external_thumbnails=False)
    html = _assemble(config, messages, service)
    assert 'class="embedvideowrap youtube no-fetch"' in html


def test_caption_present_only_with_description(embed_config, messages, service):
    html = _assemble(embed_config, messages, service, description="<b>Never</b> gonna")
    assert '<div class="thumbcaption"><b>Never</b> gonna</div>' in html

    html = _assemble(embed_config, messages, service)
    assert "thumbcaption" not in html


def test_consent_overlay_precedes_player(messages, service):
    config = EmbedVideoConfig(require_consent=True)
    html = _assemble(config, messages, service)
    consent_at = html.index('<div class="embedvideo-consent">')
    assert consent_at < html.index("<iframe")
    assert html.index('class="embedvideowrap youtube"') < consent_at
    assert messages.text("embedvideo_consent_text") in html


def test_no_consent_overlay_by_default(embed_config, messages, service):
    assert "embedvideo-consent" not in _assemble(embed_config, messages, service)
