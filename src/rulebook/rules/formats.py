"""String format rules: ``StringRule`` plus ``is_email`` and ``is_url``.

These are deliberately small syntactic checks. They do not resolve hosts
or look up MX records.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from rulebook.domain.errors import ValidationError
from rulebook.rules.base import MessageRule

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+$"
)
_HOST_LABEL_RE = re.compile(r"^(?!-)[a-zA-Z0-9-]{1,63}(?<!-)$")
_TLD_RE = re.compile(r"^[a-zA-Z]{2,63}$")
_URL_SCHEMES = frozenset({"http", "https", "ftp", "ftps", "ws", "wss"})


class StringRule(MessageRule):
    """Rule backed by a ``str -> bool`` predicate. Blank values pass.

    Example::

        abc = StringRule(lambda s: s == "abc", "wrong_abc")
    """

    def __init__(self, predicate: Callable[[str], bool], message: str, code: str = "") -> None:
        self.predicate = predicate
        self.message = message
        self.code = code

    def validate(self, value: Any) -> ValidationError | None:
        if value is None or value == "":
            return None
        if isinstance(value, str) and self.predicate(value):
            return None
        return self.fail()


def is_valid_email(value: str) -> bool:
    """Syntactic email check (local part, ``@``, dotted domain)."""
    if len(value) > 254:
        return False
    return _EMAIL_RE.match(value) is not None


def _is_valid_host(host: str) -> bool:
    if host == "localhost":
        return True
    try:
        ipaddress.ip_address(host.strip("[]"))
        return True
    except ValueError:
        pass
    labels = host.rstrip(".").split(".")
    if len(labels) < 2 or not _TLD_RE.match(labels[-1]):
        return False
    return all(_HOST_LABEL_RE.match(label) for label in labels)


def is_valid_url(value: str) -> bool:
    """URL check; a missing scheme is read as ``http://``.

    Examples:
        >>> is_valid_url("https://example.com/path"), is_valid_url("example")
        (True, False)
    """
    if not value or any(ch.isspace() for ch in value):
        return False
    candidate = value if "://" in value else f"http://{value}"
    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError:
        return False
    if parts.scheme.lower() not in _URL_SCHEMES or not parts.hostname:
        return False
    if port is not None and not 0 < port < 65536:
        return False
    return _is_valid_host(parts.hostname)


is_email = StringRule(is_valid_email, "must be a valid email address", "validation_is_email")
is_url = StringRule(is_valid_url, "must be a valid URL", "validation_is_url")
