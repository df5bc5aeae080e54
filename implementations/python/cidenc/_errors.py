"""Error codes and exception classes.

There are exactly three failure kinds.  Every one of them is raised at the
point of the invalid call; encoders never return partial output.

    ERR_VALUE_TOO_LARGE   an integer or length falls outside the encodable
                          domain (varint >= 2^28, CBOR length >= 2^32)
    ERR_MALFORMED_VARINT  the verification decoder ran out of bytes before
                          a terminating byte
    ERR_INVALID_NODE      a DAG-CBOR node has neither data nor links
"""

from __future__ import annotations

ERR_VALUE_TOO_LARGE: str = "ERR_VALUE_TOO_LARGE"
ERR_MALFORMED_VARINT: str = "ERR_MALFORMED_VARINT"
ERR_INVALID_NODE: str = "ERR_INVALID_NODE"

ERROR_CODES = (ERR_VALUE_TOO_LARGE, ERR_MALFORMED_VARINT, ERR_INVALID_NODE)


class CidError(Exception):
    """Base exception for all encoder failures.

    The `.code` attribute is one of the ERR_* strings above.  Catch this
    class to handle every kind at once, or one of the subclasses below.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


class ValueTooLarge(CidError):
    def __init__(self, msg: str = "") -> None:
        super().__init__(ERR_VALUE_TOO_LARGE, msg)


class MalformedVarint(CidError):
    def __init__(self, msg: str = "") -> None:
        super().__init__(ERR_MALFORMED_VARINT, msg)


class InvalidNode(CidError):
    def __init__(self, msg: str = "") -> None:
        super().__init__(ERR_INVALID_NODE, msg)
