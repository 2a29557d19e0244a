"""Design file key extraction from share URLs.

Two URL shapes are recognised, case-insensitively: `<host>/file/<key>` and
`<host>/design/<key>`, where `<key>` is the alphanumeric run that follows.
An unmatched URL yields None; callers treat that as "unresolved", never as
an error.
"""

from __future__ import annotations

import re
from typing import Optional

_PREFIX = r"^(?:[a-z][a-z0-9+.\-]*://)?(?P<host>[^/?#\s]+)/"
_FILE_RE = re.compile(_PREFIX + r"file/(?P<key>[a-z0-9]+)", re.IGNORECASE)
_DESIGN_RE = re.compile(_PREFIX + r"design/(?P<key>[a-z0-9]+)", re.IGNORECASE)


def _host_matches(host: str, marker: str) -> bool:
    return host == marker or host.endswith("." + marker)


def resolve_design_key(url: Optional[str], host_marker: Optional[str] = None) -> Optional[str]:
    """Return the design file key embedded in `url`, or None.

    When `host_marker` is given (e.g. ``"figma.com"``) the URL host must be
    that domain or one of its subdomains. The `file/` shape is tried before
    `design/`.
    """
    if not url:
        return None
    text = url.strip()
    for pattern in (_FILE_RE, _DESIGN_RE):
        match = pattern.match(text)
        if not match:
            continue
        host = match.group("host").lower().rsplit(":", 1)[0]
        if host_marker and not _host_matches(host, host_marker.lower().lstrip(".")):
            return None
        return match.group("key")
    return None


__all__ = ["resolve_design_key"]
