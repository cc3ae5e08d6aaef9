"""
Raw parser-function arguments → named argument dict.

The first raw argument names the provider. Every following argument is either
`name=value` or a bare value; bare values are assigned by position using
FIELD_SCHEMA. The position counter advances for every argument, named ones
included, so `[id=abc, 640]` assigns 640 to `alignment` (index 1).
"""

from collections.abc import Sequence

FIELD_SCHEMA: tuple[str, ...] = (
    "id",
    "alignment",
    "description",
    "dimensions",
    "urlArgs",
    "width",
    "height",
    "autoResize",
    "vAlignment",
)


def default_arguments() -> dict[str, object]:
    """Fresh argument dict with every schema field at its default."""
    return {
        "id": "",
        "alignment": "",
        "description": "",
        "dimensions": "",
        "urlArgs": "",
        "width": None,
        "height": None,
        "autoResize": True,
        "vAlignment": "",
    }


def parse_embed_args(raw_args: Sequence[str]) -> tuple[str, dict[str, object]]:
    """
    Split raw arguments into (service name, arguments). Named arguments may use any
    name and overwrite unconditionally; bare values past the end of the schema are dropped.
    """
    service = raw_args[0].strip() if raw_args else ""
    results = default_arguments()

    rest = raw_args[1:]
    for counter in range(len(rest)):
        name, sep, value = rest[counter].partition("=")
        if sep:
            results[name.strip()] = value.strip()
            continue

        bare = rest[counter].strip()
        if not bare or counter >= len(FIELD_SCHEMA):
            continue

        key = FIELD_SCHEMA[counter]
        if key == "autoResize" and bare.lower() == "false":
            results[key] = False
        else:
            results[key] = bare

    return service, results
