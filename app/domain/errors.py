"""Dispatch error taxonomy.

Steps of the resolution pipeline raise these; the use case converts them into
a ``ResolutionFailure`` so no caller ever sees a raw exception.
"""

from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNRESOLVED_LOCATION = "unresolved_location"
    GATEWAY_FAILURE = "gateway_failure"
    PARTIAL_GEOCODE_FAILURE = "partial_geocode_failure"


class FailureReason(str, Enum):
    NO_VALID_POSTAL = "no_valid_postal"
    EMPTY_ROSTER = "empty_roster"
    UNRESOLVED_TICKET = "unresolved_ticket"
    NO_RESOLVED_TECHNICIANS = "no_resolved_technicians"


class DispatchError(Exception):
    category: ErrorCategory

    def __init__(self, reason: FailureReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class InvalidInputError(DispatchError):
    category = ErrorCategory.INVALID_INPUT


class UnresolvedLocationError(DispatchError):
    category = ErrorCategory.UNRESOLVED_LOCATION


class GatewayError(Exception):
    """Routing or geocoding service failed; recovered by the estimate path."""

    category = ErrorCategory.GATEWAY_FAILURE
