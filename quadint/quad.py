from math import gcd, isqrt, sqrt
from typing import Iterator, Optional, Union

from quadint.config import DEFAULT_STYLE, DisplayStyle
from quadint.errors import (
    AlgebraicDegreeOverflowError,
    DivisionRemainder,
    NotDivisibleError,
    UnsupportedNumberDomainError,
)
from quadint.ring import QuadRing
from quadint.utils import check_int64

OTHER_OP_TYPES = int
_OTHER_OP_TYPES = (int,)  # mypyc-friendly for isinstance
OP_TYPES = Union["quadint", OTHER_OP_TYPES]
RING_TYPES = Union[QuadRing, int]


def _as_ring(ring: RING_TYPES) -> QuadRing:
    if isinstance(ring, QuadRing):
        return ring
    return QuadRing(ring)


def _cross_ring_product_kind(d1: int, d2: int) -> int:
    """
    Degree over Q of the smallest field holding sqrt(d1) * sqrt(d2), for d1 != d2.

    Returns 2 when d1 * d2 is a perfect square (the surd collapses to a rational,
    leaving a real quadratic number), and 4 otherwise (the basis
    {1, sqrt(d1), sqrt(d2), sqrt(d1 * d2)} is needed).
    """
    n = d1 * d2
    if n >= 0:
        r = isqrt(n)
        if r * r == n:
            return 2
    return 4


def _signed_term(coeff: int, sym: str) -> str:
    """'+ 3sym', '- sym' and so on, for a term following another one."""
    sign = "-" if coeff < 0 else "+"
    mag = -coeff if coeff < 0 else coeff
    mag_str = "" if mag == 1 else str(mag)
    return f"{sign} {mag_str}{sym}"


def _leading_term(coeff: int, sym: str) -> str:
    if coeff == 1:
        return sym
    if coeff == -1:
        return "-" + sym
    return f"{coeff}{sym}"


class quadint:
    """
    Imaginary quadratic integer.

    Represents (a + b*sqrt(d)) / denom in the ring QuadRing(d), with denom in {1, 2}.
    denom = 2 is only possible when the ring has half-integers, and then a and b are
    both odd.

    Internally stored in "numerator units" as (A, B) representing:
        (A + B*sqrt(d)) / 2

    so A and B are even for ordinary integers and both odd for half-integers.

    Notes:
      - The norm (A^2 - d*B^2) / 4 is always a non-negative integer; abs() returns it.
      - Components and norms are kept within the signed 64-bit range; anything
        larger raises OverflowError.
    """

    __slots__ = ("a2", "b2", "ring")

    a2: int
    b2: int
    ring: QuadRing

    def __init__(self, a: int, b: int, ring: RING_TYPES, denom: int = 1) -> None:
        """
        Initialize a quadint.

        Args:
            a: Numerator of the rational part.
            b: Numerator of the coefficient of sqrt(d).
            ring: The ring, or its radicand.
            denom: 1 or 2 (or -1, -2, which negate a and b).
                (So 1/2 + sqrt(-3)/2 is quadint(1, 1, -3, 2).)

        Raises:
            ValueError: If the denominator or the parity is invalid for the ring.
            OverflowError: If a component is outside the signed 64-bit range.
            InvalidRingError: If ring is a radicand that does not define a ring.
        """
        a0, b0, e0 = int(a), int(b), int(denom)
        r = _as_ring(ring)

        if e0 < 0:
            a0, b0, e0 = -a0, -b0, -e0
        if e0 == 1:
            a0 *= 2
            b0 *= 2
        elif e0 != 2:
            raise ValueError(f"Denominator must be 1 or 2, got {denom}")

        if (a0 ^ b0) & 1:
            raise ValueError("With denominator 2, a and b must have the same parity")
        if (a0 & 1) and not r.has_half_integers:
            raise ValueError(f"{r.to_ascii()} has no half-integers")

        e = 2 if a0 & 1 else 1
        check_int64(a0 // 2 if e == 1 else a0, "real part")
        check_int64(b0 // 2 if e == 1 else b0, "surd coefficient")

        self.a2, self.b2, self.ring = a0, b0, r

    # region constructors / conversions
    @classmethod
    def _make(cls, A: int, B: int, ring: QuadRing) -> "quadint":
        """Construct a new value from internal numerators A, B."""
        return cls(A, B, ring, 2)

    def _from_obj(self, n: OTHER_OP_TYPES) -> "quadint":
        """Embed a rational integer in this value's ring"""
        return self._make(2 * int(n), 0, self.ring)
    # endregion

    @property
    def d(self) -> int:
        return self.ring.d

    @property
    def denom(self) -> int:
        """1, or 2 for a half-integer."""
        return 2 if self.a2 & 1 else 1

    @property
    def a(self) -> int:
        """Numerator of the rational part (over denom)."""
        return self.a2 if self.a2 & 1 else self.a2 // 2

    @property
    def b(self) -> int:
        """Numerator of the surd coefficient (over denom)."""
        return self.b2 if self.b2 & 1 else self.b2 // 2

    @property
    def twice_real_part(self) -> int:
        return self.a2

    @property
    def twice_imag_part(self) -> int:
        return self.b2

    @property
    def numeric_real_part(self) -> float:
        return self.a2 / 2

    @property
    def numeric_imag_part_mult(self) -> float:
        """The coefficient of sqrt(d) as a float. For 5/2 + sqrt(-7)/2 this is 0.5."""
        return self.b2 / 2

    @property
    def numeric_imag_part(self) -> float:
        """The imaginary part as a float. For 5/2 + sqrt(-7)/2 this is about 1.3229."""
        return self.b2 / 2 * sqrt(-self.ring.d)

    def components(self) -> tuple[int, int, int]:
        """Return (a, b, denom)."""
        return (self.a, self.b, self.denom)

    def components2(self) -> tuple[int, int]:
        """Return the stored numerator components (A, B) for (...)/2."""
        return (self.a2, self.b2)

    def conjugate(self) -> "quadint":
        """(a + b*sqrt(d))/e -> (a - b*sqrt(d))/e"""
        return self._make(self.a2, -self.b2, self.ring)

    def norm(self) -> int:
        """
        Norm:
            N((A + B*sqrt(d))/2) = (A^2 - d*B^2)/4

        Raises:
            ArithmeticError: If there is a non-integral norm due to parity violation.
            OverflowError: If the norm exceeds the signed 64-bit range.

        Returns:
            int: The norm.
        """
        q, r = divmod(self.a2 * self.a2 - self.ring.d * self.b2 * self.b2, 4)
        if r != 0:
            raise ArithmeticError("Non-integral norm; parity constraint violated")

        return check_int64(q, "norm")

    def trace(self) -> int:
        """2a/e, the sum of the number and its conjugate."""
        return self.a2

    def algebraic_degree(self) -> int:
        """1 for rational integers (0 included), 2 otherwise."""
        return 1 if self.b2 == 0 else 2

    def min_polynomial(self) -> tuple[int, int, int]:
        """
        Coefficients of the minimal polynomial, constant term first.

        For 5/2 + sqrt(-7)/2 that's x^2 - 5x + 8, i.e. (8, -5, 1); for a rational
        integer n it's x - n, i.e. (-n, 1, 0).
        """
        if self.b2 == 0:
            return (-(self.a2 // 2), 1, 0)
        return (self.norm(), -self.trace(), 1)

    def min_polynomial_string(self) -> str:
        """The minimal polynomial as text, e.g. "x^2 - 5x + 8", "x + 3" or "x"."""
        c0, c1, c2 = self.min_polynomial()
        if c2 == 0:
            if c0 == 0:
                return "x"
            return f"x - {-c0}" if c0 < 0 else f"x + {c0}"

        out = "x^2"
        if c1 != 0:
            out += " " + _signed_term(c1, "x")
        return out + (f" - {-c0}" if c0 < 0 else f" + {c0}")

    def __add__(self, other: OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, quadint):
            ring = self._additive_ring(other)
            return self._make(self.a2 + other.a2, self.b2 + other.b2, ring)

        return NotImplemented

    def __radd__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if isinstance(other, quadint):
            ring = self._additive_ring(other)
            return self._make(self.a2 - other.a2, self.b2 - other.b2, ring)

        return NotImplemented

    def __rsub__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__neg__().__add__(other)

    def __neg__(self) -> "quadint":
        return self._make(-self.a2, -self.b2, self.ring)

    def __pos__(self) -> "quadint":
        return self._make(self.a2, self.b2, self.ring)

    def _additive_ring(self, other: "quadint") -> QuadRing:
        """
        The ring a sum or difference lands in. A rational integer from another ring
        is simply moved over.

        Raises:
            AlgebraicDegreeOverflowError: If both operands are irrational and the
                rings differ.
        """
        if self.ring == other.ring or other.b2 == 0:
            return self.ring
        if self.b2 == 0:
            return other.ring

        raise AlgebraicDegreeOverflowError(
            f"{self} and {other} are in different rings; their sum needs degree 4",
            2, 4, self, other)

    def __mul__(self, other: OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if not isinstance(other, quadint):
            return NotImplemented

        if self.ring == other.ring or other.b2 == 0:
            ring = self.ring
        elif self.b2 == 0:
            ring = other.ring
        elif _cross_ring_product_kind(self.ring.d, other.ring.d) == 2:
            raise UnsupportedNumberDomainError(
                f"The product of {self} and {other} lies in a real quadratic ring", self, other)
        else:
            raise AlgebraicDegreeOverflowError(
                f"The product of {self} and {other} needs degree 4", 2, 4, self, other)

        # (A + B*sqrt(d))/2 * (C + D*sqrt(d))/2 has denominator 4;
        # we store with denominator 2, so the numerators are halved.
        # With a rational operand d drops out (B*D == 0), so either ring will do.
        A, B = self.a2, self.b2
        C, D = other.a2, other.b2
        P = A * C + ring.d * B * D
        Q = A * D + B * C

        if (P & 1) or (Q & 1):
            raise ArithmeticError("Non-integral product; parity constraint violated")

        return self._make(P // 2, Q // 2, ring)

    def __rmul__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "quadint":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")

        result = self._from_obj(1)
        base: quadint = self
        while e:
            if e & 1:
                result = result * base

            e >>= 1
            if e:
                base = base * base

        return result

    # region Division
    def _fraction(self, divisor: "quadint") -> DivisionRemainder:
        """
        The exact quotient self / divisor as a reduced fraction.

        With self = (A + B*sqrt(d))/2 and divisor = (C + D*sqrt(d))/2:
            self / divisor = self * conj(divisor) / N(divisor)
                           = ((A*C - d*B*D) + (B*C - A*D)*sqrt(d)) / (C^2 - d*D^2)

        Raises:
            UnsupportedNumberDomainError: If the rings differ.
            ZeroDivisionError: If divisor is 0.
        """
        if self.ring != divisor.ring:
            raise UnsupportedNumberDomainError(
                f"Division across rings is not supported ({self} / {divisor})", self, divisor)

        if not divisor:
            raise ZeroDivisionError("quadint division by zero")

        d = self.ring.d
        A, B = self.a2, self.b2
        C, D = divisor.a2, divisor.b2
        re = A * C - d * B * D
        im = B * C - A * D
        den = C * C - d * D * D

        g = gcd(re, im, den)
        return DivisionRemainder(re // g, im // g, den // g, d)

    def _lattice_point(self, frac: DivisionRemainder) -> Optional["quadint"]:
        """The ring element equal to frac, if there is one."""
        if frac.denom == 1:
            return self._make(2 * frac.re_numer, 2 * frac.im_numer, self.ring)

        # Reduced, so at most one of the numerators is even
        if frac.denom == 2 and self.ring.has_half_integers and (frac.re_numer & frac.im_numer & 1):
            return self._make(frac.re_numer, frac.im_numer, self.ring)

        return None

    def __truediv__(self, other: OP_TYPES) -> "quadint":
        """
        Exact division.

        Raises:
            NotDivisibleError: If the quotient is not in the ring. The exception
                carries the quotient as a DivisionRemainder.
            UnsupportedNumberDomainError: If the rings differ.
            ZeroDivisionError: If other == 0.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if not isinstance(other, quadint):
            return NotImplemented

        frac = self._fraction(other)
        q = self._lattice_point(frac)
        if q is None:
            raise NotDivisibleError(f"{self} is not divisible by {other}", frac)

        return q

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            new_other = self._from_obj(other)
            return new_other.__truediv__(self)

        return NotImplemented

    def __divmod__(self, other: OP_TYPES) -> tuple["quadint", "quadint"]:
        """
        Nearest-lattice division:
            self = q * other + r

        q is the lattice point next to self / other that leaves the remainder of
        least norm. In the norm-Euclidean rings abs(r) < abs(other) always holds.

        Raises:
            ZeroDivisionError: if other == 0
            UnsupportedNumberDomainError: If the rings differ.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            other = self._from_obj(other)

        if not isinstance(other, quadint):
            return NotImplemented

        frac = self._fraction(other)
        exact = self._lattice_point(frac)
        if exact is not None:
            return exact, self._from_obj(0)

        from quadint.remainder import bounding_integers

        best_q: Optional[quadint] = None
        best_r: Optional[quadint] = None
        best_norm = 0
        for cand in bounding_integers(frac):
            r = self - cand * other
            n = abs(r)
            if best_r is None or n < best_norm:
                best_q, best_r, best_norm = cand, r, n

        assert best_q is not None and best_r is not None
        return best_q, best_r

    def __floordiv__(self, other: OP_TYPES) -> "quadint":
        q, _ = divmod(self, other)
        return q

    def __rfloordiv__(self, other: OTHER_OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            new_other = self._from_obj(other)
            return new_other.__floordiv__(self)

        return NotImplemented

    def __mod__(self, other: OP_TYPES) -> "quadint":
        _, r = divmod(self, other)
        return r
    # endregion

    def __abs__(self) -> int:
        return self.norm()

    def __bool__(self) -> bool:
        return (self.a2 | self.b2) != 0

    def __iter__(self) -> Iterator[int]:
        return iter(self.components())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, quadint):
            return False

        return self.ring == other.ring and (self.a2, self.b2) == (other.a2, other.b2)

    def __hash__(self) -> int:
        return hash((self.ring.d, self.a2, self.b2))

    def __repr__(self) -> str:
        a, b, e = self.components()
        if e == 1:
            return f"quadint({a}, {b}, {self.ring.d})"
        return f"quadint({a}, {b}, {self.ring.d}, {e})"

    # region Rendering
    def _render(self, surd: str) -> str:
        """Shared plain-text layout: "7", "-sqrt", "3 - 2sqrt", "1/2 + sqrt/2"."""
        a, b, e = self.components()
        if e == 2:
            return f"{a}/2 {_signed_term(b, surd + '/2')}"
        if b == 0:
            return str(a)
        if a == 0:
            return _leading_term(b, surd)
        return f"{a} {_signed_term(b, surd)}"

    def _render_theta(self, letter: str) -> str:
        """
        Layout in terms of theta = 1/2 + sqrt(d)/2, or omega = -1/2 + sqrt(-3)/2
        when d = -3. Only valid for rings with half-integers.

            (A + B*sqrt(d))/2 = (A - B)/2 + B*theta = (A + B)/2 + B*omega
        """
        y = self.b2
        x = (self.a2 + y) // 2 if self.ring.d == -3 else (self.a2 - y) // 2
        if x == 0 and y != 0:
            return _leading_term(y, letter)
        if y == 0:
            return str(x)
        return f"{x} {_signed_term(y, letter)}"

    def _use_theta(self, style: DisplayStyle) -> bool:
        return style.theta_notation and self.ring.has_half_integers

    def __str__(self) -> str:
        return self.to_str()

    def to_str(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        """Unicode text, e.g. "3 - 2√(-5)", "1/2 + √(-7)/2", "2 + i" or "1 + 3θ"."""
        if self._use_theta(style):
            return self._render_theta("ω" if self.ring.d == -3 else "θ")
        return self._render("i" if self.ring.d == -1 else f"√({self.ring.d})")

    def to_ascii(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        """Like to_str() but spelling out "sqrt", "theta" and "omega"."""
        if self._use_theta(style):
            return self._render_theta("omega" if self.ring.d == -3 else "theta")
        return self._render("i" if self.ring.d == -1 else f"sqrt({self.ring.d})")

    def to_tex(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        r"""TeX, e.g. "3 - 2 \sqrt{-5}" or "\frac{1}{2} + \frac{\sqrt{-7}}{2}"."""
        if self._use_theta(style):
            return self._render_theta("\\omega" if self.ring.d == -3 else "\\theta")
        if self.ring.d == -1:
            return self.to_str()

        a, b, e = self.components()
        surd = f"\\sqrt{{{self.ring.d}}}"
        sign = "-" if b < 0 else "+"
        mag = -b if b < 0 else b
        mag_str = "" if mag == 1 else f"{mag} "

        if e == 2:
            lead = f"-\\frac{{{-a}}}{{2}}" if a < 0 else f"\\frac{{{a}}}{{2}}"
            return f"{lead} {sign} \\frac{{{mag_str}{surd}}}{{2}}"
        if b == 0:
            return str(a)
        if a == 0:
            return ("-" if b < 0 else "") + mag_str + surd
        return f"{a} {sign} {mag_str}{surd}"

    def to_tex_single_denom(self) -> str:
        r"""TeX with one fraction bar for half-integers, e.g. "\frac{1 + \sqrt{-7}}{2}"."""
        a, b, e = self.components()
        if e == 1:
            return self.to_tex()

        mag = -b if b < 0 else b
        mag_str = "" if mag == 1 else f"{mag} "
        return f"\\frac{{{a} {'-' if b < 0 else '+'} {mag_str}\\sqrt{{{self.ring.d}}}}}{{2}}"

    def to_html(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        """HTML, e.g. "3 &minus; 2&radic;(&minus;5)" or "2 + <i>i</i>"."""
        if self._use_theta(style):
            out = self._render_theta("&omega;" if self.ring.d == -3 else "&theta;")
        else:
            out = self._render("<i>i</i>" if self.ring.d == -1 else f"&radic;({self.ring.d})")
        return out.replace("-", "&minus;")
    # endregion

    def _normalize_unit(self) -> "quadint":
        """
        Deterministic associate choice up to +-1: multiply by -1 so the first
        nonzero numerator component is > 0.

        Returns:
            quadint: The unit normalized quadint.
        """
        if self.a2 < 0 or (self.a2 == 0 and self.b2 < 0):
            return -self
        return self


def sort_by_norm(values: list[quadint]) -> list[quadint]:
    """A new list of the values in ascending order of norm (stable for equal norms)."""
    return sorted(values, key=abs)
