"""Document-local JSON pointers (`#/path/to/target`)."""

from typing import Iterable, List, Union
from urllib.parse import quote, unquote


def escape_token(token: str) -> str:
    """Escape one pointer segment (RFC 6901: `~` -> `~0`, `/` -> `~1`)."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape_token(token: str) -> str:
    """Inverse of escape_token. Order matters: `~1` before `~0`."""
    return token.replace("~1", "/").replace("~0", "~")


def is_local_pointer(pointer: str) -> bool:
    return pointer.startswith("#")


def parse_pointer(pointer: str) -> List[str]:
    """Split a local pointer into unescaped segments.

    `#` is the document root and yields no segments.

    Raises:
        ExternalReferenceError: If the pointer does not start with `#`
        UnresolvedReferenceError: If the fragment is not a JSON pointer
    """
    from asyncapi_types.errors import ExternalReferenceError, UnresolvedReferenceError

    if not is_local_pointer(pointer):
        raise ExternalReferenceError(
            pointer, f"External reference not supported (only '#/...' pointers): {pointer}"
        )
    fragment = unquote(pointer[1:])
    if fragment == "":
        return []
    if not fragment.startswith("/"):
        raise UnresolvedReferenceError(pointer, f"Malformed pointer (expected '#/...'): {pointer}")
    return [unescape_token(part) for part in fragment[1:].split("/")]


def format_pointer(tokens: Iterable[Union[str, int]]) -> str:
    """Join segments into a `#/...` pointer, escaping each one."""
    parts = [quote(escape_token(str(t)), safe="~!$&'()*+,;=:@{}") for t in tokens]
    if not parts:
        return "#"
    return "#/" + "/".join(parts)


def child_pointer(pointer: str, token: Union[str, int]) -> str:
    """Append one segment to an already formatted pointer."""
    segment = quote(escape_token(str(token)), safe="~!$&'()*+,;=:@{}")
    if pointer == "#":
        return "#/" + segment
    return pointer + "/" + segment
