import logging
import re
from urllib.parse import unquote

log = logging.getLogger(__name__)

GOOGLE_REDIRECT = re.compile(r"https://www\.google\.com/url\?q=([^&]*)")
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URLDecodeError(ValueError):
    """Raised when a redirect target is not valid percent-encoded UTF-8."""


def decode_component(value: str) -> str:
    """
    Strictly percent-decode a URI component.

    :param value: Percent-encoded text.
    :returns: Decoded text. ``+`` is not treated as a space.
    :raises URLDecodeError: On a stray ``%`` or escapes that are not UTF-8.
    """
    bad = MALFORMED_ESCAPE.search(value)
    if bad:
        raise URLDecodeError(f"malformed escape at offset {bad.start()}: {value!r}")
    try:
        return unquote(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise URLDecodeError(f"escapes are not valid UTF-8: {value!r}") from e


def unwrap_redirect(url: str) -> str:
    """
    Return the real target of a Google ``/url?q=`` redirect link.

    :param url: Value of an ``href`` attribute.
    :returns: The decoded ``q`` parameter, or ``url`` unchanged when it is not
              a redirect link.
    :raises URLDecodeError: When the ``q`` parameter cannot be decoded.
    """
    match = GOOGLE_REDIRECT.search(url)
    if not match:
        return url
    target = decode_component(match.group(1))
    log.debug("[urls.unwrap_redirect] unwrapped=%s", target)
    return target
