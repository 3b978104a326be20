import logging
from dataclasses import dataclass
from typing import Optional

from quadint.errors import AlgebraicDegreeOverflowError, GCDAttempt, NonEuclideanDomainError, NotDivisibleError
from quadint.quad import OP_TYPES, quadint
from quadint.remainder import bounding_integers

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GCDResult:
    """
    Outcome of a best-effort GCD.

    If `reliable` is False the descent got stuck (no bounding integer reduced the
    norm) and `value` is only the last divisor reached, not a verified GCD.
    """
    value: quadint
    reliable: bool


def _coerce_pair(a: OP_TYPES, b: OP_TYPES) -> tuple[quadint, quadint]:
    """Embed a rational integer operand in the other operand's ring."""
    if isinstance(a, quadint):
        if isinstance(b, quadint):
            x, y = a, b
        else:
            x, y = a, a._from_obj(b)
    elif isinstance(b, quadint):
        x, y = b._from_obj(a), b
    else:
        raise TypeError("At least one operand must be a quadint; use math.gcd for rational integers")

    if x.ring != y.ring:
        raise AlgebraicDegreeOverflowError(
            f"{x} and {y} are in different rings ({x.ring.to_ascii()} and {y.ring.to_ascii()})",
            2, 4, x, y)

    return x, y


def _descend(a: quadint, b: quadint, *, strict: bool) -> GCDResult:
    """
    Euclidean algorithm where each remainder comes from the first bounding integer
    of the quotient that reduces the norm.

    Raises:
        ArithmeticError: If strict and no bounding integer reduces the norm.
    """
    curr_a, curr_b = (b, a) if abs(a) < abs(b) else (a, b)

    while curr_b:
        rem: Optional[quadint] = None
        try:
            q = curr_a / curr_b
            rem = curr_a - q * curr_b
        except NotDivisibleError as e:
            limit = abs(curr_b)
            for cand in bounding_integers(e.remainder):
                r = curr_a - cand * curr_b
                if abs(r) < limit:
                    q, rem = cand, r
                    break

        if rem is None:
            if strict:
                raise ArithmeticError("Euclidean descent failed (no norm-reducing candidate)")

            _logger.info("GCD descent stuck dividing %s by %s in %s; result is unreliable",
                         curr_a, curr_b, curr_a.ring.to_ascii())
            return GCDResult(curr_b._normalize_unit(), False)

        _logger.debug("GCD step: %s = (%s) * (%s) + %s", curr_a, q, curr_b, rem)
        curr_a, curr_b = curr_b, rem

    return GCDResult(curr_a._normalize_unit(), True)


def euclidean_gcd(a: OP_TYPES, b: OP_TYPES) -> quadint:
    """
    GCD via the Euclidean algorithm, in the norm-Euclidean rings only.

    The result is normalized so its first nonzero component is positive. Either
    operand may be a plain int, which is taken to be in the other operand's ring.

    Returns:
        quadint: The gcd.

    Raises:
        AlgebraicDegreeOverflowError: If a and b are in different rings.
        NonEuclideanDomainError: If the ring is not norm-Euclidean. Pass its
            `attempt` to try_anyway() for a best-effort answer.
    """
    x, y = _coerce_pair(a, b)
    if not x.ring.is_norm_euclidean:
        raise NonEuclideanDomainError(f"{x.ring.to_ascii()} is not a norm-Euclidean domain",
                                      GCDAttempt(x, y))

    return _descend(x, y, strict=True).value


def try_anyway(attempt: GCDAttempt) -> GCDResult:
    """
    Run the Euclidean algorithm on a declined GCD request regardless of the ring.

    For gcd(29, -7 + 5sqrt(-5)) this finds 3 + 2sqrt(-5). For gcd(2, 1 + sqrt(-5))
    the descent gets stuck and the result is flagged unreliable.

    Returns:
        GCDResult: The value and whether it can be trusted.
    """
    x, y = _coerce_pair(attempt.a, attempt.b)
    return _descend(x, y, strict=False)


def best_effort_gcd(a: OP_TYPES, b: OP_TYPES) -> GCDResult:
    """euclidean_gcd() where it applies, try_anyway() elsewhere."""
    try:
        return GCDResult(euclidean_gcd(a, b), True)
    except NonEuclideanDomainError as e:
        return try_anyway(e.attempt)
