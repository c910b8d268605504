# app/core/errors.py
from __future__ import annotations

from typing import Optional


class UpstreamUnavailable(Exception):
    """
    Raised when an upstream StatsAPI call fails at the network level,
    answers with a non-2xx status, or returns a body that is not a JSON object.
    """

    def __init__(self, resource: str, cause: Optional[BaseException] = None):
        self.resource = resource
        self.cause = cause
        msg = f"{resource} request failed"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
