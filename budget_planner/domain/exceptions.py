"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ProfileNotFoundError(DomainException):
    """User has not saved a financial profile yet"""

    pass


class StoreError(DomainException):
    """Ledger or profile store failed or is unavailable"""

    pass
