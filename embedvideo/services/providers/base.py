"""Video service contract: one configured provider handle per embed."""

from abc import ABC, abstractmethod


class BaseVideoService(ABC):
    """
    Abstract video service. A handle is configured field by field (width, height,
    id, URL arguments) and then asked for its player markup. Handles are never
    reused across embeds.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier, e.g. 'youtube', 'twitchvod'."""
        ...

    @abstractmethod
    def set_width(self, width: int | None) -> None:
        """Set the player width. Missing or invalid values fall back to the provider default."""
        ...

    @abstractmethod
    def set_height(self, height: int | None) -> None:
        """Set the player height. Missing or invalid values are derived from the width."""
        ...

    @abstractmethod
    def set_video_id(self, video_id: str) -> bool:
        """Validate and store the id. Returns False when the provider rejects it."""
        ...

    @abstractmethod
    def set_url_args(self, url_args: str) -> bool:
        """Validate and store extra URL arguments. Returns False when rejected."""
        ...

    @abstractmethod
    def get_width(self) -> int:
        ...

    @abstractmethod
    def get_height(self) -> int:
        ...

    @abstractmethod
    def get_id(self) -> str | None:
        ...

    @abstractmethod
    def get_url_args(self) -> str:
        ...

    @abstractmethod
    def get_html(self) -> str | None:
        """Player markup, or None when the handle cannot render."""
        ...
