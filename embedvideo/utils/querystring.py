"""Query-string helpers for provider URL arguments."""

from urllib.parse import parse_qsl, urlencode


def parse_query(query: str) -> dict[str, str]:
    """Parse a query string into a dict. Repeated keys keep the last value; blank values are kept."""
    return dict(parse_qsl(query, keep_blank_values=True))


def set_query_param(query: str, key: str, value: str) -> str:
    """Set or override one parameter and re-serialize the query string."""
    params = parse_query(query)
    params[key] = value
    return urlencode(params)


def append_query(url: str, query: str) -> str:
    """Append a query string to a URL that may already carry one."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
