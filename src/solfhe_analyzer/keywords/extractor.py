"""Split visited URLs into normalized keyword candidates."""

from __future__ import annotations

import ipaddress
import logging
from urllib.parse import quote, unquote, urlsplit

logger = logging.getLogger(__name__)

IGNORED_WORDS = frozenset({"http", "https", "www", "com", "org", "net"})

# Schemes that are meaningless without a host. For these "\" separates
# path segments just like "/".
_HOST_SCHEMES = {"http", "https", "ws", "wss", "ftp"}

_FORBIDDEN_HOST_CHARS = frozenset(" #%/:<>?@[\\]^|")

# Left as-is when percent-encoding a path.
_PATH_SAFE = "/%:@!$&'()*+,;=[]^|\\"
_OPAQUE_PATH_SAFE = "".join(chr(c) for c in range(0x20, 0x7F))

_SINGLE_DOT = {".", "%2e"}
_DOUBLE_DOT = {"..", ".%2e", "%2e.", "%2e%2e"}


def extract_keywords(url: str) -> list[str]:
    """Return the keyword candidates of one URL, host segments first.

    Unparsable URLs yield an empty list. Duplicates are kept; counting is
    left to the aggregator.
    """
    parsed = _parse(url)
    if parsed is None:
        return []
    host, path = parsed

    keywords = []
    for segment in host.split(".") + path.split("/"):
        word = segment.lower()
        if not word or word in IGNORED_WORDS:
            continue
        keywords.append(word)
    return keywords


def _parse(url: str) -> tuple[str, str] | None:
    """Split a URL into (domain, path); None when it does not parse."""
    url = (url or "").strip()
    for ch in "\t\r\n":
        url = url.replace(ch, "")
    if not url:
        return None
    try:
        parts = urlsplit(url)
        if parts.scheme in _HOST_SCHEMES and "\\" in url:
            parts = urlsplit(_backslashes_to_slashes(url))
        hostname = parts.hostname or ""
        parts.port  # raises on an out-of-range port
    except ValueError as e:
        logger.debug("Skipping unparsable URL %r: %s", url, e)
        return None

    if not parts.scheme:
        return None
    if parts.scheme in _HOST_SCHEMES and not hostname:
        return None

    domain = _domain(hostname)
    if domain is None:
        logger.debug("Skipping URL with invalid host %r", url)
        return None

    path = parts.path
    if path.startswith("/"):
        path = quote(_remove_dot_segments(path), safe=_PATH_SAFE)
    else:
        path = quote(path, safe=_OPAQUE_PATH_SAFE)
    return domain, path


def _backslashes_to_slashes(url: str) -> str:
    """Treat "\\" as "/" before the query or fragment starts."""
    end = len(url)
    for ch in "?#":
        idx = url.find(ch)
        if idx != -1:
            end = min(end, idx)
    return url[:end].replace("\\", "/") + url[end:]


def _domain(hostname: str) -> str | None:
    """ASCII form of a domain host; "" for IP literals, None if invalid."""
    if not hostname:
        return ""
    try:
        ipaddress.ip_address(hostname)
        return ""
    except ValueError:
        pass

    host = unquote(hostname)
    if any(ch in _FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in host):
        return None

    labels = []
    for label in host.split("."):
        if label.isascii():
            labels.append(label.lower())
            continue
        try:
            labels.append(label.encode("idna").decode("ascii").lower())
        except UnicodeError:
            return None
    return ".".join(labels)


def _remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments of an absolute path."""
    segments = path.split("/")[1:]
    output: list[str] = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if output:
                output.pop()
            if last:
                output.append("")
        elif lowered in _SINGLE_DOT:
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)
