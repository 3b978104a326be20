"""
Primality, irreducibility and prime factorization of imaginary quadratic integers.

All of these work from the norm: a rational prime p either stays prime in the
ring (inert), becomes a product of two conjugate primes of norm p (split), or
becomes a unit times the square of a prime of norm p (ramified). Which one
happens is told by the Kronecker symbol (discriminant / p).
"""
import logging
from dataclasses import dataclass
from math import isqrt, prod
from typing import Iterator, Optional, Union

from sympy import divisors, factorint

from quadint.errors import InvalidArgumentError, NonUniqueFactorizationDomainError, NotDivisibleError
from quadint.ntheory import is_prime as is_prime_int
from quadint.ntheory import mod_sqrt_prime, symbol_kronecker
from quadint.quad import quadint
from quadint.ring import QuadRing

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadFactorization:
    """
    Prime factorization in a UFD:

        x = unit * P1 * P2 * ... * Pk

    - unit has norm 1.
    - Pi are primes, grouped by the rational prime below them in ascending order.
      Each has norm p (split or ramified p) or p^2 (inert p, then Pi = p itself).
    """
    unit: quadint
    primes: tuple[quadint, ...]

    def prod(self) -> quadint:
        """Recreate the number"""
        return prod(self.primes, start=self.unit)


def _require_ufd(num: quadint, what: str) -> None:
    if not num.ring.is_ufd:
        raise NonUniqueFactorizationDomainError(
            f"{num.ring.to_ascii()} is not a unique factorization domain; {what} is not defined for {num.to_ascii()}",
            num)


def _is_inert(ring: QuadRing, p: int) -> bool:
    return symbol_kronecker(ring.discriminant, p) == -1


def is_prime(num: Union[int, quadint]) -> bool:
    """
    Primality of a rational integer, or of an imaginary quadratic integer in a UFD.

    An algebraic integer is prime iff its norm is a rational prime, or its norm is
    p^2 for a rational prime p that is inert in the ring (then the number is an
    associate of p). In Z[i]: 3 and 1 + i are prime, 2 and 5 are not.

    Raises:
        NonUniqueFactorizationDomainError: If num is in a ring that is not a UFD,
            e.g. Z[sqrt(-5)] where 2 * 3 = (1 + sqrt(-5)) * (1 - sqrt(-5)).
    """
    if not isinstance(num, quadint):
        return is_prime_int(num)

    _require_ufd(num, "primality")

    n = abs(num)
    if is_prime_int(n):
        return True

    p = isqrt(n)
    return p * p == n and is_prime_int(p) and _is_inert(num.ring, p)


def _elements_of_norm(ring: QuadRing, m: int) -> Iterator[quadint]:
    """Every element of norm m, up to sign."""
    d = ring.d
    target = 4 * m
    # (A^2 - d*B^2) / 4 == m in numerator units
    for B in range(0, isqrt(target // -d) + 1):
        rest = target + d * B * B
        A = isqrt(rest)
        if A * A != rest or ((A ^ B) & 1):
            continue
        if (A & 1) and not ring.has_half_integers:
            continue
        yield quadint(A, B, ring, 2)
        if A and B:
            yield quadint(A, -B, ring, 2)


def is_irreducible(num: quadint) -> bool:
    """
    Whether num has no factorization into two non-units. Zero and units are not
    irreducible. Valid in any ring: in Z[sqrt(-5)], 2 and 1 + sqrt(-5) are
    irreducible although neither is prime.

    Outside the UFDs this is a search over the proper divisors m <= sqrt(N(num)) of
    the norm for an element of norm m dividing num.
    """
    n = abs(num)
    if n < 2:
        return False
    if is_prime_int(n):
        return True
    if num.ring.is_ufd:
        return is_prime(num)

    for m in divisors(n):
        if m == 1:
            continue
        if m * m > n:
            break
        for cand in _elements_of_norm(num.ring, m):
            try:
                num / cand
            except NotDivisibleError:
                continue
            _logger.debug("%s is divisible by %s (norm %d)", num, cand, m)
            return False

    return True


def _cornacchia(disc: int, p: int) -> Optional[tuple[int, int]]:
    """
    Solve x^2 + |disc|*y^2 = 4p for a prime p and a discriminant disc = 0, 1 (mod 4)
    (modified Cornacchia, Cohen 1.5.3).

    Returns:
        tuple: (x, y), or None if there is no solution.
    """
    if p == 2:
        r = isqrt(disc + 8) if disc + 8 >= 0 else -1
        return (r, 1) if r >= 0 and r * r == disc + 8 else None

    x0 = mod_sqrt_prime(disc, p)
    if x0 is None:
        return None
    if (x0 ^ disc) & 1:
        x0 = p - x0

    a, b = 2 * p, x0
    limit = isqrt(4 * p)
    while b > limit:
        a, b = b, a % b

    c, rem = divmod(4 * p - b * b, -disc)
    if rem != 0:
        return None
    y = isqrt(c)
    if y * y != c:
        return None
    return b, y


def _prime_of_norm(ring: QuadRing, p: int) -> quadint:
    """
    A prime of norm p, for p split or ramified in the ring.

    Raises:
        ArithmeticError: If there is none, i.e. p is inert.
    """
    disc = ring.discriminant
    sol = _cornacchia(disc, p)
    if sol is None:
        raise ArithmeticError(f"No element of norm {p} in {ring.to_ascii()}")

    x, y = sol
    # (x + y*sqrt(disc))/2, where sqrt(disc) = 2*sqrt(d) unless disc == d
    B = y if disc == ring.d else 2 * y
    return quadint(x, B, ring, 2)._normalize_unit()


def factor(num: quadint) -> QuadFactorization:
    """
    Factor into primes in one of the nine imaginary quadratic UFDs.

    For each rational prime p dividing the norm: an inert p is itself prime and
    divides num exactly (exponent of p in the norm)/2 times; otherwise a prime of
    norm p is found with Cornacchia's algorithm, and it or its conjugate is divided
    out once per power of p in the norm.

    Returns:
        QuadFactorization: The factorization; prod() gives num back.

    Raises:
        NonUniqueFactorizationDomainError: If the ring is not a UFD.
        InvalidArgumentError: If num is 0.
        ArithmeticError: If there is an unexpected problem preventing factoring, indicating a bug in the code.
    """
    _require_ufd(num, "prime factorization")
    if not num:
        raise InvalidArgumentError("0 has no prime factorization")

    ring = num.ring
    rest = num
    primes: list[quadint] = []
    for p, e in sorted(factorint(abs(num)).items()):
        if _is_inert(ring, p):
            pi = quadint(p, 0, ring)
            for _ in range(e // 2):
                rest = rest / pi
                primes.append(pi)
            _logger.debug("%d is inert in %s, %s has it %d times", p, ring.to_ascii(), num, e // 2)
            continue

        pi = _prime_of_norm(ring, p)
        for _ in range(e):
            found = False
            for cand in (pi, pi.conjugate()):
                try:
                    rest = rest / cand
                except NotDivisibleError:
                    continue
                primes.append(cand)
                found = True
                break

            if not found:
                raise ArithmeticError(f"No prime of norm {p} divides {rest} (unexpected)")
        _logger.debug("Extracted %d primes over %d from %s", e, p, num)

    if abs(rest) != 1:
        raise ArithmeticError("remaining cofactor is not a unit; factorization incomplete")

    return QuadFactorization(unit=rest, primes=tuple(primes))
