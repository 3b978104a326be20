from math import sqrt

from quadint.config import DEFAULT_STYLE, DisplayStyle
from quadint.errors import InvalidRingError
from quadint.ntheory import is_squarefree
from quadint.utils import check_int64

# The imaginary quadratic rings that are Euclidean with respect to the norm.
NORM_EUCLIDEAN_RADICANDS = frozenset((-1, -2, -3, -7, -11))

# The imaginary quadratic rings with unique factorization (Heegner numbers).
HEEGNER_NUMBERS = frozenset((-1, -2, -3, -7, -11, -19, -43, -67, -163))


class QuadRing:
    """
    The ring of algebraic integers of the imaginary quadratic field Q(sqrt(d)).

    When d = 1 (mod 4) the ring also contains the "half-integers"
    (a + b*sqrt(d))/2 with a and b both odd; otherwise it is just Z[sqrt(d)].

    Two rings are equal iff they have the same radicand.
    """

    __slots__ = ("d",)

    d: int

    def __init__(self, d: int) -> None:
        """
        Initialize a QuadRing.

        Args:
            d: The radicand. Must be negative and squarefree.

        Raises:
            InvalidRingError: If d is not negative or not squarefree.
        """
        d0 = check_int64(int(d), "radicand")
        if d0 >= 0:
            raise InvalidRingError(f"Negative integer required for the radicand, got {d0}", d0)
        if not is_squarefree(d0):
            raise InvalidRingError(f"Squarefree integer required for the radicand, got {d0}", d0)

        self.d = d0

    @property
    def has_half_integers(self) -> bool:
        """True iff d = 1 (mod 4), e.g. for d = -3, -7, -11, -15."""
        return self.d % 4 == 1

    @property
    def abs_radicand(self) -> int:
        return -self.d

    @property
    def abs_radicand_sqrt(self) -> float:
        """sqrt(|d|) as a float, for display purposes only."""
        return sqrt(-self.d)

    @property
    def discriminant(self) -> int:
        """The field discriminant: d if d = 1 (mod 4), else 4d."""
        return self.d if self.has_half_integers else 4 * self.d

    @property
    def is_norm_euclidean(self) -> bool:
        return self.d in NORM_EUCLIDEAN_RADICANDS

    @property
    def is_ufd(self) -> bool:
        return self.d in HEEGNER_NUMBERS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadRing):
            return False

        return self.d == other.d

    def __hash__(self) -> int:
        return hash(("QuadRing", self.d))

    def __repr__(self) -> str:
        return f"QuadRing({self.d})"

    # region Labels
    def __str__(self) -> str:
        """Unicode label: "Z[i]", "Z[ω]", "O_(Q(√-7))" or "Z[√-5]"."""
        if self.d == -1:
            return "Z[i]"
        if self.d == -3:
            return "Z[ω]"
        if self.has_half_integers:
            return f"O_(Q(√{self.d}))"
        return f"Z[√{self.d}]"

    def to_ascii(self) -> str:
        """Label without non-ASCII characters: "Z[omega]", "O_(Q(sqrt(-7)))", "Z[sqrt(-5)]"."""
        if self.d == -1:
            return "Z[i]"
        if self.d == -3:
            return "Z[omega]"
        if self.has_half_integers:
            return f"O_(Q(sqrt({self.d})))"
        return f"Z[sqrt({self.d})]"

    def to_tex(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        r"""TeX label, e.g. "\mathbb Z[\sqrt{-5}]" or "\mathcal O_{\mathbb Q(\sqrt{-7})}"."""
        q_char, z_char = ("\\mathbb Q", "\\mathbb Z") if style.blackboard_bold else ("\\textbf Q", "\\textbf Z")

        if self.d == -1:
            return z_char + "[i]"
        if self.d == -3:
            return z_char + "[\\omega]"
        if self.has_half_integers:
            return f"\\mathcal O_{{{q_char}(\\sqrt{{{self.d}}})}}"
        return f"{z_char}[\\sqrt{{{self.d}}}]"

    def to_html(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        """HTML label, using the double-struck letters or <b> tags depending on the style."""
        q_char, z_char = ("ℚ", "ℤ") if style.blackboard_bold else ("<b>Q</b>", "<b>Z</b>")

        if self.d == -1:
            return z_char + "[<i>i</i>]"
        if self.d == -3:
            return z_char + "[ω]"
        if self.has_half_integers:
            return f"<i>O</i><sub>{q_char}(&radic;({self.d}))</sub>"
        return f"{z_char}[&radic;{self.d}]"

    def to_filename(self) -> str:
        """A short label that is safe in file names: "ZI", "ZW", "ZI2", "OQI7"."""
        if self.d == -1:
            return "ZI"
        if self.d == -3:
            return "ZW"
        if self.has_half_integers:
            return f"OQI{-self.d}"
        return f"ZI{-self.d}"
    # endregion
