from quadint.algebraic import QuadFactorization, factor, is_irreducible, is_prime
from quadint.errors import (
    AlgebraicDegreeOverflowError,
    DivisionRemainder,
    GCDAttempt,
    InvalidArgumentError,
    InvalidRingError,
    NonEuclideanDomainError,
    NonUniqueFactorizationDomainError,
    NotDivisibleError,
    QuadIntError,
    RecoverableError,
    UnsupportedNumberDomainError,
)
from quadint.gcd import GCDResult, best_effort_gcd, euclidean_gcd, try_anyway
from quadint.ntheory import (
    is_squarefree,
    moebius_mu,
    prime_factors,
    random_negative_squarefree,
    symbol_jacobi,
    symbol_kronecker,
    symbol_legendre,
)
from quadint.quad import quadint, sort_by_norm
from quadint.remainder import bounding_integers, round_away_from_zero, round_towards_zero
from quadint.ring import HEEGNER_NUMBERS, NORM_EUCLIDEAN_RADICANDS, QuadRing

__all__ = [
    "AlgebraicDegreeOverflowError",
    "DivisionRemainder",
    "GCDAttempt",
    "GCDResult",
    "HEEGNER_NUMBERS",
    "InvalidArgumentError",
    "InvalidRingError",
    "NORM_EUCLIDEAN_RADICANDS",
    "NonEuclideanDomainError",
    "NonUniqueFactorizationDomainError",
    "NotDivisibleError",
    "QuadFactorization",
    "QuadIntError",
    "QuadRing",
    "RecoverableError",
    "UnsupportedNumberDomainError",
    "best_effort_gcd",
    "bounding_integers",
    "euclidean_gcd",
    "factor",
    "is_irreducible",
    "is_prime",
    "is_squarefree",
    "moebius_mu",
    "prime_factors",
    "quadint",
    "random_negative_squarefree",
    "round_away_from_zero",
    "round_towards_zero",
    "sort_by_norm",
    "symbol_jacobi",
    "symbol_kronecker",
    "symbol_legendre",
    "try_anyway",
]
