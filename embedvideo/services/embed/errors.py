"""Embed validation errors and their user-visible rendering."""

from embedvideo.config.messages.static import MessageCatalog
from embedvideo.services.embed.models import EmbedOutput

ERROR_KINDS = (
    "service",
    "missingparams",
    "id",
    "urlargs",
    "container",
    "alignment",
    "valignment",
    "unknown",
)


class EmbedError(ValueError):
    """Raised when an embed cannot be resolved. `kind` selects the error message; `details` fill it."""

    def __init__(self, kind: str, *details: object):
        super().__init__(f"{kind}: {', '.join('' if d is None else str(d) for d in details)}")
        self.kind = kind
        self.details = details


class ErrorFormatter:
    """Turns an error kind plus details into an inline error box."""

    def __init__(self, messages: MessageCatalog):
        self.messages = messages

    def format(self, kind: str = "unknown", *details: object) -> EmbedOutput:
        message = self.messages.escaped(f"error_embedvideo_{kind}", *details)
        return EmbedOutput(html=f"<div class='errorbox'>{message}</div>")

    def from_error(self, error: EmbedError) -> EmbedOutput:
        return self.format(error.kind, *error.details)
