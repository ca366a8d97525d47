"""
URL query string helpers.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

# Schemes whose empty path serializes as "/"
_HIERARCHICAL_SCHEMES = ('http', 'https', 'ftp', 'ws', 'wss')


def _split(url: str):
    parts = urlsplit(url)
    if not parts.path and parts.scheme in _HIERARCHICAL_SCHEMES and parts.netloc:
        parts = parts._replace(path='/')
    return parts


def _query_pairs(query: str) -> List[Tuple[str, str]]:
    return parse_qsl(query, keep_blank_values=True)


def _with_query(parts, pairs: List[Tuple[str, str]]) -> str:
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def _param_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def get_query_params(url: str) -> Dict[str, str]:
    """
    Parse the query parameters of a URL into a dict.

    Example:
        >>> get_query_params("https://example.com/?search=test&page=2")
        {'search': 'test', 'page': '2'}
    """
    return dict(_query_pairs(urlsplit(url).query))


def update_query_param(url: str, key: str, value: Any) -> str:
    """Set a query parameter, replacing every existing value for the key."""
    parts = _split(url)
    pairs = []
    replaced = False
    for name, current in _query_pairs(parts.query):
        if name != key:
            pairs.append((name, current))
        elif not replaced:
            pairs.append((key, _param_text(value)))
            replaced = True
    if not replaced:
        pairs.append((key, _param_text(value)))
    return _with_query(parts, pairs)


def remove_query_param(url: str, key: str) -> str:
    """Remove every value of a query parameter."""
    parts = _split(url)
    pairs = [(name, value) for name, value in _query_pairs(parts.query) if name != key]
    return _with_query(parts, pairs)


def build_url(base_url: str, path: Optional[str] = None,
              query_params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build a URL from a base, an optional path and optional query parameters.

    Args:
        base_url: Base URL, e.g. "https://example.com"
        path: Path appended to the base path, with or without leading slash
        query_params: Parameters to set; None values become empty strings

    Returns:
        The constructed URL
    """
    parts = _split(base_url)

    if path:
        normalized = path if path.startswith('/') else f"/{path}"
        base_path = parts.path[:-1] if parts.path.endswith('/') else parts.path
        parts = parts._replace(path=f"{base_path}{normalized}")

    if not query_params:
        return urlunsplit(parts)

    url = urlunsplit(parts)
    for key, value in query_params.items():
        url = update_query_param(url, key, value)
    return url
