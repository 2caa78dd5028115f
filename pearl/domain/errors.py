class PearlError(Exception):
    """
    Base exception for all Pearl domain errors.
    """
    pass


class ProviderError(PearlError):
    """
    Raised when the ephemeris or a subsystem calculator fails
    (network, parse, calculation or timeout).
    """
    pass


class InvalidAngleError(PearlError, ValueError):
    """
    Raised when a longitude outside [0, 360) reaches the aspect matcher.
    """
    pass


class InvalidBirthDataError(PearlError, ValueError):
    """
    Raised when birth inputs are invalid or inconsistent.
    """
    pass


class IncompleteProfileError(PearlError):
    """
    Raised when synthesis is attempted without all four core profiles.
    """
    pass


class LifePurposeError(PearlError):
    """
    Raised when a life purpose profile cannot be derived from a chart.
    """
    pass
