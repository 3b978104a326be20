"""
Recovery operations for a failed exact division.

A NotDivisibleError carries the true quotient as a DivisionRemainder; the
functions here turn it back into ring elements.
"""
from quadint.errors import DivisionRemainder
from quadint.quad import quadint
from quadint.ring import QuadRing


def _floor_div(a: int, b: int) -> int:
    return a // b


def _ceil_div(a: int, b: int) -> int:
    return -((-a) // b)


def bounding_integers(rem: DivisionRemainder) -> list[quadint]:
    """
    The vertices of the lattice cell containing the fractional quotient.

    On an integer grid the cell is spanned by 1 and sqrt(d); with half-integers it
    is spanned by theta = (1 + sqrt(d))/2 and its conjugate, whose integer
    combinations are exactly the (X + Y*sqrt(d))/2 with X = Y (mod 2).

    The order is: lower-left corner, step in the first basis direction, step in the
    second, far corner. A coordinate that is already integral contributes only once,
    so there are 1, 2 or 4 values. For (8 - i)/5 in Z[i] that's 1 - i, 2 - i, 1, 2.

    Returns:
        list: The bounding ring elements, without duplicates.
    """
    ring = QuadRing(rem.radicand)
    re, im, den = rem.re_numer, rem.im_numer, rem.denom

    coords: list[tuple[int, int]] = []
    if ring.has_half_integers:
        # value = u*theta + v*conj(theta) with u = (re + im)/den, v = (re - im)/den
        u, v = re + im, re - im
        for cv in (_floor_div(v, den), _ceil_div(v, den)):
            for cu in (_floor_div(u, den), _ceil_div(u, den)):
                coords.append((cu + cv, cu - cv))
    else:
        for cy in (_floor_div(im, den), _ceil_div(im, den)):
            for cx in (_floor_div(re, den), _ceil_div(re, den)):
                coords.append((2 * cx, 2 * cy))

    out: list[quadint] = []
    seen: set[tuple[int, int]] = set()
    for A, B in coords:
        if (A, B) in seen:
            continue
        seen.add((A, B))
        out.append(quadint(A, B, ring, 2))

    return out


def round_towards_zero(rem: DivisionRemainder) -> quadint:
    """
    The bounding integer of least norm (the first one on ties).

    On an integer grid this is truncation of both coordinates; dividing 5 + i by
    3 + i in Z[i] rounds towards zero to 1.
    """
    return min(bounding_integers(rem), key=abs)


def round_away_from_zero(rem: DivisionRemainder) -> quadint:
    """
    The bounding integer of greatest norm (the first one on ties).

    On an integer grid this rounds both coordinates away from zero; dividing 5 + i
    by 3 + i in Z[i] gives 2 - i.
    """
    return max(bounding_integers(rem), key=abs)
