from core.constants.aggregation import (
    MAX_FILE_BYTES,
    URL_SCHEMES,
    USER_AGENT,
    PATH_SEPARATOR,
    STRUCTURE_HEADER,
    URL_LISTING_PREFIX,
    FILE_HEADER_TEMPLATE,
    URL_HEADER_TEMPLATE,
    FRAGMENT_TERMINATOR,
    READ_ERROR_TEMPLATE,
    FETCH_ERROR_TEMPLATE,
)

__all__ = [
    "MAX_FILE_BYTES",
    "URL_SCHEMES",
    "USER_AGENT",
    "PATH_SEPARATOR",
    "STRUCTURE_HEADER",
    "URL_LISTING_PREFIX",
    "FILE_HEADER_TEMPLATE",
    "URL_HEADER_TEMPLATE",
    "FRAGMENT_TERMINATOR",
    "READ_ERROR_TEMPLATE",
    "FETCH_ERROR_TEMPLATE",
]
