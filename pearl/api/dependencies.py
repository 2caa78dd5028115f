from fastapi import HTTPException, status

from pearl.domain.errors import (
    InvalidAngleError,
    InvalidBirthDataError,
    PearlError,
    ProviderError,
)
from pearl.services.fingerprint_service import FingerprintService
from pearl.services.transit_service import TransitService


def get_fingerprint_service() -> FingerprintService:
    """
    Fingerprint service for the request. Tests override this provider.

    A misconfigured provider (e.g. Chiron without data files) fails here,
    so construction errors are mapped the same way as route errors.
    """
    try:
        return FingerprintService()
    except PearlError as exc:
        raise http_error_for(exc) from exc


def get_transit_service() -> TransitService:
    try:
        return TransitService()
    except PearlError as exc:
        raise http_error_for(exc) from exc


def http_error_for(exc: PearlError) -> HTTPException:
    """
    Map a domain error onto an HTTP error.

    Provider failures are retryable (503), bad input is 422.
    """

    if isinstance(exc, ProviderError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc) or "Calculation provider unavailable",
        )

    if isinstance(exc, (InvalidBirthDataError, InvalidAngleError)):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )
