"""Collaborators supplied by the document host: inline rendering and resource declaration."""

import html
from abc import ABC, abstractmethod
from typing import Protocol


class InlineRenderer(Protocol):
    """Renders caption text as inline markup."""

    def render_inline(self, text: str) -> str:
        ...


class OutputContext:
    """Resource identifiers declared for the current output. Repeated declarations are kept."""

    def __init__(self) -> None:
        self.modules: list[str] = []
        self.module_styles: list[str] = []

    def add_modules(self, *names: str) -> None:
        self.modules.extend(names)

    def add_module_styles(self, *names: str) -> None:
        self.module_styles.extend(names)


class BaseEmbedHost(ABC):
    """A host that can render caption markup and collects declared resources."""

    def __init__(self, output: OutputContext | None = None):
        self.output = output if output is not None else OutputContext()

    @abstractmethod
    def render_inline(self, text: str) -> str:
        ...


class PlainTextHost(BaseEmbedHost):
    """Host without a markup language: captions are escaped text."""

    def render_inline(self, text: str) -> str:
        return html.escape(text, quote=False)
