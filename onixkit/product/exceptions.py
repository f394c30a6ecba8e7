"""Exceptions raised by the ONIX product facade."""

from typing import Optional


class OnixError(Exception):
    """Base class for every onixkit product error."""


class StructuralError(OnixError):
    """Raised when a <Product> breaks one of the configured cardinality rules.

    The rule is checked once, when the Product is constructed; the Product is
    unusable afterwards, so this error is never caught inside onixkit.
    """

    def __init__(self, message: str, element: Optional[str] = None,
                 expected: Optional[int] = None, found: Optional[int] = None):
        """Initialize StructuralError.

        Args:
            message: Human-readable error message
            element: Reference name of the offending element
            expected: The violated bound (minimum or maximum)
            found: Number of occurrences actually present
        """
        super().__init__(message)
        self.element = element
        self.expected = expected
        self.found = found

    @classmethod
    def too_few(cls, element: str, minimum: int, found: int) -> "StructuralError":
        return cls(
            f"expecting at least {minimum} <{element}> child(ren), but {found} found",
            element=element, expected=minimum, found=found,
        )

    @classmethod
    def too_many(cls, element: str, maximum: int, found: int) -> "StructuralError":
        return cls(
            f"expecting at most {maximum} <{element}> child(ren), but {found} found",
            element=element, expected=maximum, found=found,
        )


class NotFoundError(OnixError, LookupError):
    """Raised when a keyed lookup or a mandatory child element has no match."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name

    @classmethod
    def child(cls, name: str) -> "NotFoundError":
        return cls(f"<{name}> not found", name=name)
