from dataclasses import dataclass
from math import sqrt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quadint.quad import quadint


class QuadIntError(ArithmeticError):
    """Base class for every failure raised by quadint."""


class RecoverableError(QuadIntError):
    """
    A failure whose payload carries enough data for the caller to retry.

    See NotDivisibleError and NonEuclideanDomainError.
    """


class InvalidRingError(QuadIntError, ValueError):
    """A radicand that is zero, positive or not squarefree."""

    def __init__(self, message: str, radicand: int) -> None:
        super().__init__(message)
        self.radicand = radicand


class InvalidArgumentError(QuadIntError, ValueError):
    """A number theoretic function was called outside its domain."""


class AlgebraicDegreeOverflowError(QuadIntError):
    """
    The result of an operation has a higher algebraic degree than a quadratic
    integer can hold. For example sqrt(-2) + sqrt(-7) needs the degree 4 basis
    of Q(sqrt(-2), sqrt(-7)).
    """

    def __init__(self,
                 message: str,
                 expected_degree: int,
                 necessary_degree: int,
                 *operands: "quadint") -> None:
        super().__init__(message)
        self.expected_degree = expected_degree
        self.necessary_degree = necessary_degree
        self.operands = operands


class UnsupportedNumberDomainError(QuadIntError):
    """
    The result has an acceptable degree but lies in a ring this package has no
    type for, such as a real quadratic ring.
    """

    def __init__(self, message: str, *operands: "quadint") -> None:
        super().__init__(message)
        self.operands = operands


class NonUniqueFactorizationDomainError(QuadIntError):
    """Prime factorization or primality was requested in a ring that is not a UFD."""

    def __init__(self, message: str, number: "quadint") -> None:
        super().__init__(message)
        self.number = number


# TODO: Once Py3.9 support has been dropped, add slots=True
@dataclass(frozen=True)
class DivisionRemainder:
    """
    The exact quotient of a failed division:

        (re_numer + im_numer * sqrt(radicand)) / denom

    reduced to lowest terms with denom > 0. It lies in Q(sqrt(radicand)) but
    not on the ring's lattice.
    """
    re_numer: int
    im_numer: int
    denom: int
    radicand: int

    @property
    def numeric_real_part(self) -> float:
        """For 3/4 + 7sqrt(-2)/4 this is 0.75."""
        return self.re_numer / self.denom

    @property
    def numeric_imag_part_mult(self) -> float:
        """The surd coefficient. For 3/4 + 7sqrt(-2)/4 this is 1.75."""
        return self.im_numer / self.denom

    @property
    def numeric_imag_part(self) -> float:
        """The imaginary part proper. For 3/4 + 7sqrt(-2)/4 this is about 2.4749."""
        return self.numeric_imag_part_mult * sqrt(-self.radicand)


@dataclass(frozen=True)
class GCDAttempt:
    """The operands of a GCD request that the strict algorithm declined."""
    a: "quadint"
    b: "quadint"


class NotDivisibleError(RecoverableError):
    """
    Exact division left the ring. Not raised for division by zero.

    The quotient is kept in `remainder`; pass it to
    quadint.remainder.round_towards_zero, round_away_from_zero or
    bounding_integers to get nearby ring elements.
    """

    def __init__(self, message: str, remainder: DivisionRemainder) -> None:
        super().__init__(message)
        self.remainder = remainder


class NonEuclideanDomainError(RecoverableError):
    """
    A Euclidean GCD was requested in a ring outside the known norm-Euclidean
    set. Pass `attempt` to quadint.gcd.try_anyway for a best-effort result.
    """

    def __init__(self, message: str, attempt: GCDAttempt) -> None:
        super().__init__(message)
        self.attempt = attempt
