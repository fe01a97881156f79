"""
request_builder.py

Turns a path template plus arguments into a fully encoded request URL.

Path arguments are percent-encoded as single path segments, query values are
form-encoded, and optional query values that are None (or empty lists) are
left out entirely. Query parameters keep the order they were declared in so
that URLs are deterministic.
"""

from dataclasses import dataclass, field
from string import Formatter
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from kaiascan.api.errors import ValidationError

MIN_PAGE = 1
MIN_SIZE = 1
MAX_SIZE = 2000

QueryArgs = Union[Mapping[str, Any], Sequence[Tuple[str, Any]]]


@dataclass
class RequestSpec:
    """Path and encoded query pairs of a single request."""

    path: str
    query: List[Tuple[str, str]] = field(default_factory=list)

    def to_url(self, base_url: str) -> str:
        url = f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"
        if self.query:
            url = f"{url}?{urlencode(self.query)}"
        return url


def require(name: str, value: Any) -> None:
    """
    Rejects a missing or empty required argument.

    :raises ValidationError: If ``value`` is None, an empty/blank string, or an empty list.
    """
    if value is None:
        raise ValidationError(f"{name} is required")
    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{name} is required")
    if isinstance(value, (list, tuple)) and not value:
        raise ValidationError(f"{name} list is required")


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")


def validate_page(page: Any) -> None:
    _require_int("page", page)
    if page < MIN_PAGE:
        raise ValidationError(f"page must be >= {MIN_PAGE}")


def validate_size(size: Any) -> None:
    _require_int("size", size)
    if size < MIN_SIZE or size > MAX_SIZE:
        raise ValidationError(f"size must be between {MIN_SIZE} and {MAX_SIZE}")


def validate_pagination(page: Any, size: Any) -> None:
    """Checks ``page >= 1`` and ``1 <= size <= 2000``."""
    validate_page(page)
    validate_size(size)


def _encode_value(value: Any) -> Optional[str]:
    # None and empty lists mean "leave the parameter out"
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return ",".join(str(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _query_items(query_args: Optional[QueryArgs]) -> Iterable[Tuple[str, Any]]:
    if not query_args:
        return []
    if isinstance(query_args, Mapping):
        return query_args.items()
    return query_args


def build_request(path_template: str, path_args: Optional[Mapping[str, Any]] = None,
                  query_args: Optional[QueryArgs] = None) -> RequestSpec:
    """
    Builds the path and query of a request without the base URL.

    :param path_template: Path with ``{name}`` placeholders, e.g. ``api/v1/blocks/{blockNumber}/burns``.
    :param path_args: Values for every placeholder in the template.
    :param query_args: Ordered mapping or pairs of query values; None values are omitted.
    :return: The request spec.
    :raises ValidationError: On a missing path argument or out-of-range page/size.
    """
    path_args = path_args or {}

    segments = {}
    for _, name, _, _ in Formatter().parse(path_template):
        if name is None:
            continue
        value = path_args.get(name)
        require(name, value)
        segments[name] = quote(str(value), safe="")
    path = path_template.format(**segments)

    query = []
    for key, value in _query_items(query_args):
        if value is None:
            continue
        if key == "page":
            validate_page(value)
        elif key == "size":
            validate_size(value)
        encoded = _encode_value(value)
        if encoded is not None:
            query.append((key, encoded))

    return RequestSpec(path=path, query=query)


def build_url(base_url: str, path_template: str, path_args: Optional[Mapping[str, Any]] = None,
              query_args: Optional[QueryArgs] = None) -> str:
    """
    Builds a complete request URL.

    :param base_url: Network base URL, with or without a trailing slash.
    :param path_template: Path template relative to the base URL.
    :param path_args: Values for the template placeholders.
    :param query_args: Query values in declaration order.
    :return: The encoded URL.
    :raises ValidationError: If an argument is missing, empty or out of range.
    """
    require("base_url", base_url)
    return build_request(path_template, path_args, query_args).to_url(base_url)


def parse_query(url: str) -> List[Tuple[str, str]]:
    """Decodes the query string of ``url`` back into ``(key, value)`` pairs."""
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)
