# -*- coding: utf-8 -*-
"""Cooperative cancellation for route traversals.

A traversal polls its token at every path and segment boundary. The token
trips either when :meth:`CancellationToken.cancel` is called or when its
optional deadline passes.
"""

from __future__ import annotations

import time

from locate_along_line.errors import OperationCancelledError


class CancellationToken:
    """Token for checking if an operation should be cancelled.

    Args:
        timeout: Optional number of seconds after which the token is
            considered cancelled
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._cancelled = False
        self._deadline = None if timeout is None else time.monotonic() + timeout

    @property
    def expired(self) -> bool:
        """Check if the deadline has passed."""
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        """Check if cancellation was requested or the deadline has passed."""
        return self._cancelled or self.expired

    def cancel(self) -> None:
        """Request cancellation."""
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        """Raise if cancellation was requested.

        Raises:
            OperationCancelledError: If the token was cancelled or expired
        """
        if self._cancelled:
            raise OperationCancelledError("cancelled")
        if self.expired:
            raise OperationCancelledError("timeout")
