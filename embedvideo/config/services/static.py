"""Static video service definitions loader. Read-only; no business logic."""

import json
from pathlib import Path

from embedvideo.config.services.models import ServiceDefinition

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ServiceDefinition] | None = None


def load_service_definitions() -> dict[str, ServiceDefinition]:
    """Load service definitions from static.json. Keys are provider names."""
    global _cached
    if _cached is not None:
        return _cached
    raw = _config_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    services = data.get("services", {})
    _cached = {k: ServiceDefinition.model_validate(v) for k, v in services.items()}
    return _cached


def get_service_definition(name: str) -> ServiceDefinition | None:
    """Return the definition for the given provider name, or None if missing."""
    return load_service_definitions().get(name)
