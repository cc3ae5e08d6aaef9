"""Localized message catalogs loaded from <lang>.json. Read-only; no business logic."""

import html
import json
import re
from pathlib import Path

_config_dir = Path(__file__).resolve().parent

_PLACEHOLDER = re.compile(r"\$(\d+)")

_cached: dict[str, "MessageCatalog"] = {}


class MessageCatalog:
    """
    Message templates keyed by name. Placeholders are $1..$n and are filled
    positionally; a missing argument becomes an empty string.
    """

    def __init__(self, messages: dict[str, str], language: str = "en"):
        self.language = language
        self._messages = dict(messages)

    def has(self, key: str) -> bool:
        return key in self._messages

    def text(self, key: str, *args: object) -> str:
        """Interpolated message without escaping. Unknown keys render as ⧼key⧽."""
        template = self._messages.get(key)
        if template is None:
            return f"⧼{key}⧽"
        values = ["" if a is None else str(a) for a in args]

        def _sub(match: re.Match) -> str:
            index = int(match.group(1)) - 1
            return values[index] if 0 <= index < len(values) else ""

        return _PLACEHOLDER.sub(_sub, template)

    def escaped(self, key: str, *args: object) -> str:
        """Interpolated message, HTML-escaped for direct inclusion in markup."""
        return html.escape(self.text(key, *args), quote=True)


def load_message_catalog(language: str = "en") -> MessageCatalog:
    """Load the catalog for a language from <language>.json. Raises ValueError if missing."""
    if language in _cached:
        return _cached[language]
    path = _config_dir / f"{language}.json"
    if not path.is_file():
        raise ValueError(f"No message catalog for language: {language!r}")
    data = json.loads(path.read_text(encoding="utf-8"))
    catalog = MessageCatalog(data, language=language)
    _cached[language] = catalog
    return catalog


def get_message_catalog() -> MessageCatalog:
    """Return the default (English) catalog."""
    return load_message_catalog("en")
