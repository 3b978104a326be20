"""
Elementary number theory on rational integers: trial-division factoring, primality,
squarefree testing and the Legendre, Jacobi and Kronecker symbols.
"""
import random

from math import gcd, isqrt
from typing import Generator, Optional

from sympy import factorint, isprime

from quadint.errors import InvalidArgumentError
from quadint.utils import cache_generator

# Trial division goes this far; whatever survives beyond it is handed to sympy.
TRIAL_DIVISION_LIMIT = 1 << 16


@cache_generator
def primes() -> Generator[int, None, None]:
    """All primes in increasing order (incremental sieve of Eratosthenes)."""
    yield 2
    composites: dict[int, int] = {}
    n = 3
    while True:
        step = composites.pop(n, 0)
        if step == 0:
            composites[n * n] = 2 * n
            yield n
        else:
            m = n + step
            while m in composites:
                m += step
            composites[m] = step
        n += 2


def prime_factors(num: int) -> list[int]:
    """
    Prime factors of num, with multiplicity, in ascending order.

    For a negative number the list starts with -1, e.g. -44100 gives
    [-1, 2, 2, 3, 3, 5, 5, 7, 7]. The factorization of 1 is the empty list.

    Returns:
        list: The factors.

    Raises:
        InvalidArgumentError: If num is 0.
    """
    n = int(num)
    if n == 0:
        raise InvalidArgumentError("0 has no prime factorization")

    factors: list[int] = []
    if n < 0:
        factors.append(-1)
        n = -n

    for p in primes():
        if p > TRIAL_DIVISION_LIMIT or p * p > n:
            break
        while n % p == 0:
            factors.append(p)
            n //= p

    if n > 1:
        if n < TRIAL_DIVISION_LIMIT * TRIAL_DIVISION_LIMIT:
            # No factor up to sqrt(n) survived, so n is prime
            factors.append(n)
        else:
            for p, e in sorted(factorint(n).items()):
                factors.extend([p] * e)

    return factors


def is_prime(num: int) -> bool:
    """
    Whether a rational integer is prime. Negative primes count: -2 and 47 are
    prime, while -25, -1, 0, 1 and 91 are not.
    """
    n = abs(int(num))
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    root = isqrt(n)
    for p in primes():
        if p > root:
            return True
        if p > TRIAL_DIVISION_LIMIT:
            break
        if n % p == 0:
            return False

    return bool(isprime(n))


def is_squarefree(num: int) -> bool:
    """
    Whether no prime divides num twice. 1 and -1 are squarefree.

    Raises:
        InvalidArgumentError: If num is 0.
    """
    n = abs(int(num))
    if n == 0:
        raise InvalidArgumentError("0 is outside the domain of the squarefree test")
    if n % 4 == 0:
        return False

    previous = 0
    for p in prime_factors(n):
        if p == previous:
            return False
        previous = p
    return True


def moebius_mu(num: int) -> int:
    """
    The Moebius function: 0 if num is not squarefree, otherwise (-1)**k for k
    distinct prime factors. mu(-n) == mu(n), e.g. mu(31) = -1, mu(32) = 0, mu(33) = 1.
    """
    if not is_squarefree(num):
        return 0
    k = sum(1 for p in prime_factors(num) if p > 0)
    return -1 if k % 2 else 1


def random_negative_squarefree(bound: int) -> int:
    """A pseudorandom squarefree integer in [-abs(bound), -1]."""
    limit = abs(int(bound))
    if limit < 1:
        raise InvalidArgumentError("bound must be nonzero")

    n = -random.randint(1, limit)
    while not is_squarefree(n):
        n += 1
    return n


def mod_sqrt_prime(n: int, p: int) -> Optional[int]:
    """Return x such that x*x % p == n % p, or None if no sqrt exists. p must be prime."""
    n %= p
    if n == 0:
        return 0

    if p == 2:
        return n

    # Euler's criterion: residue iff n^((p-1)/2) == 1 (mod p)
    if pow(n, (p - 1) // 2, p) != 1:
        return None

    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)

    # Tonelli-Shanks
    q = p - 1
    s = 0
    while q % 2 == 0:
        s += 1
        q //= 2

    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(n, q, p)
    r = pow(n, (q + 1) // 2, p)

    while t != 1:
        i = 1
        t2i = (t * t) % p
        while i < m and t2i != 1:
            t2i = (t2i * t2i) % p
            i += 1

        b = pow(c, 1 << (m - i - 1), p)
        r = (r * b) % p
        c = (b * b) % p
        t = (t * c) % p
        m = i

    return r


# region Quadratic residue symbols
def symbol_legendre(a: int, p: int) -> int:
    """
    The Legendre symbol (a/p) for an odd prime p, by Euler's criterion.

    Returns:
        int: 1 if a is a nonzero square mod p, -1 if it is a non-square, 0 if p divides a.
            For example (10/3) = 1, (10/5) = 0 and (10/7) = -1.

    Raises:
        InvalidArgumentError: If p is not a positive odd prime.
    """
    if p < 3 or not is_prime(p):
        raise InvalidArgumentError(f"{p} is not an odd prime; consider the Jacobi or Kronecker symbol")

    residue = pow(a % p, (p - 1) // 2, p)
    if residue == p - 1:
        return -1
    return residue


def symbol_jacobi(a: int, n: int) -> int:
    """
    The Jacobi symbol (a/n) for odd n > 0: the product of (a/p) over the prime
    factors p of n, with multiplicity. (8/15) = 1 although 8 is not a square mod 15.

    Raises:
        InvalidArgumentError: If n is even or not positive.
    """
    if n % 2 == 0:
        raise InvalidArgumentError(f"{n} is not odd; consider the Kronecker symbol")
    if n < 0:
        raise InvalidArgumentError(f"{n} is not positive; consider the Kronecker symbol")
    if n == 1:
        return 1
    if gcd(a, n) > 1:
        return 0

    symbol = 1
    for p in prime_factors(n):
        symbol *= symbol_legendre(a, p)
    return symbol


def _kronecker_neg_one(a: int) -> int:
    return -1 if a < 0 else 1


def _kronecker_two(a: int) -> int:
    residue = a % 8
    if residue in (1, 7):
        return 1
    if residue in (3, 5):
        return -1
    return 0


def symbol_kronecker(a: int, n: int) -> int:
    """
    The Kronecker symbol (a/n), defined for every integer n.

    Extends the Jacobi symbol with (a/-1) = sign of a, (a/2) from a mod 8
    (0 for even a) and (a/0) = 1 only for a = +-1. For example (3/2) = -1.
    """
    if n == 0:
        return 1 if a in (-1, 1) else 0
    if n == 1:
        return 1
    if gcd(a, n) > 1:
        return 0

    symbol = 1
    for p in prime_factors(n):
        if p == -1:
            symbol *= _kronecker_neg_one(a)
        elif p == 2:
            symbol *= _kronecker_two(a)
        else:
            symbol *= symbol_legendre(a, p)
    return symbol
# endregion
