"""Strict parsing of declared Content-Type values."""

import mimetypes
import re

from exceptions import InvalidMediaTypeError

# RFC 2045 token: any visible ASCII character except tspecials.
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"^({_TOKEN})/({_TOKEN})$")
_PARAM_RE = re.compile(rf'^({_TOKEN})=({_TOKEN}|"(?:[^"\\]|\\.)*")$')

# Preferred extensions where the mimetypes table has several candidates.
_PREFERRED_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "video/mp4": ".mp4",
}


def parse_media_type(content_type: str | None) -> str:
    """
    Parses a Content-Type header value and returns its lower-cased media type.

    Parameters such as ``charset`` are validated but discarded.

    Raises:
        InvalidMediaTypeError: If the value is missing or malformed.
    """
    if not content_type:
        raise InvalidMediaTypeError(content_type)

    media_type, *params = content_type.split(";")
    match = _MEDIA_TYPE_RE.match(media_type.strip())
    if match is None:
        raise InvalidMediaTypeError(content_type)

    for index, param in enumerate(params):
        param = param.strip()
        # A single trailing semicolon is tolerated.
        if not param and index == len(params) - 1:
            continue
        if not _PARAM_RE.match(param):
            raise InvalidMediaTypeError(content_type)

    return f"{match.group(1)}/{match.group(2)}".lower()


def extension_for_media_type(media_type: str) -> str:
    """
    Returns the file extension (with leading dot) for a media type.

    Raises:
        InvalidMediaTypeError: If no extension is known for the type.
    """
    extension = _PREFERRED_EXTENSIONS.get(media_type) or mimetypes.guess_extension(
        media_type
    )
    if not extension:
        raise InvalidMediaTypeError(media_type)
    return extension
