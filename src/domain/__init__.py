"""Domain layer: errors and schemas."""

from .errors import ErrorCodes, GatewayRejectError
from .schemas import (
    GatewayResponse,
    GitOperationRequest,
    Project,
    Specification,
    SpecType,
    StoredObject,
    Ticket,
    TicketStatus,
)

__all__ = [
    "ErrorCodes",
    "GatewayRejectError",
    "GatewayResponse",
    "GitOperationRequest",
    "Project",
    "Specification",
    "SpecType",
    "StoredObject",
    "Ticket",
    "TicketStatus",
]
