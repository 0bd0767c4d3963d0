"""
Translation of service exceptions into HTTP errors.
"""

import logging

from fastapi import HTTPException

from ...core.errors import (
    CommerceServiceError,
    DomainError,
    UserNotFoundError,
    OrderNotFoundError,
    OrderItemNotFoundError,
    EmailExistsError,
    OrderNotModifiableError,
    InvalidOrderStatusTransitionError,
    CannotCancelDeliveredOrderError,
)

logger = logging.getLogger("commerce-service.api.errors")

_NOT_FOUND = (UserNotFoundError, OrderNotFoundError, OrderItemNotFoundError)

_CONFLICT = (
    EmailExistsError,
    OrderNotModifiableError,
    InvalidOrderStatusTransitionError,
    CannotCancelDeliveredOrderError,
)


def status_code_for(error: CommerceServiceError) -> int:
    if isinstance(error, _NOT_FOUND):
        return 404
    if isinstance(error, _CONFLICT):
        return 409
    if isinstance(error, DomainError):
        return 400
    return 500


def to_http_exception(error: CommerceServiceError) -> HTTPException:
    """
    Build the HTTPException for a service error.

    Infrastructure and unknown errors are logged with their traceback and
    hidden behind a generic message.
    """
    status_code = status_code_for(error)

    if status_code == 500:
        logger.error(f"Internal error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=500,
            detail={
                "error_code": "INTERNAL_ERROR",
                "message": "Internal server error",
                "details": {},
            },
        )

    logger.warning(f"{error.error_code}: {error.message}")
    return HTTPException(status_code=status_code, detail=error.to_dict())
