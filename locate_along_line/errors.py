# -*- coding: utf-8 -*-
"""Error classes for linear referencing.

A measure that cannot be located on a route is NOT an error: the locator
returns ``None``. The exceptions below cover programming errors, malformed
input at the JSON boundary, and cooperative cancellation.
"""


class LocateAlongLineError(Exception):
    """Base class for all errors raised by locate_along_line."""


class UnknownUnitError(LocateAlongLineError, ValueError):
    """Raised when a distance unit is not recognized."""

    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Unknown distance unit: `{unit}`")


class InvalidRequestError(LocateAlongLineError, ValueError):
    """Raised when a locate request cannot be decoded or validated."""


class OperationCancelledError(LocateAlongLineError, InterruptedError):  # noqa: N818
    """Raised when a traversal observes a cancellation request.

    Attributes:
        reason: Why the operation was cancelled (``"cancelled"`` or ``"timeout"``)
    """

    def __init__(self, reason: str = "cancelled"):
        self.reason = reason
        super().__init__(f"Operation cancelled ({reason})")
