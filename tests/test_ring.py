import pytest

from quadint import HEEGNER_NUMBERS, NORM_EUCLIDEAN_RADICANDS, InvalidRingError, QuadIntError, QuadRing
from quadint.config import DisplayStyle

PLAIN_BOLD = DisplayStyle(blackboard_bold=False)


class TestInit:
    """Tests for the constructor"""

    def test_valid(self):
        """Negative squarefree radicands are accepted"""
        for d in (-1, -2, -3, -5, -6, -7, -10, -163, -4294967291):
            assert QuadRing(d).d == d

    def test_not_negative(self):
        """0 and positive numbers are refused"""
        for d in (0, 1, 2, 5):
            with pytest.raises(InvalidRingError) as e:
                QuadRing(d)
            assert e.value.radicand == d

    def test_not_squarefree(self):
        """Radicands divisible by a square are refused"""
        for d in (-4, -8, -9, -12, -18, -50, -75):
            with pytest.raises(InvalidRingError):
                QuadRing(d)

    def test_error_bases(self):
        """InvalidRingError is both a ValueError and a QuadIntError"""
        with pytest.raises(ValueError):
            QuadRing(-12)
        with pytest.raises(QuadIntError):
            QuadRing(3)

    def test_overflow(self):
        """The radicand must fit in 64 bits"""
        with pytest.raises(OverflowError):
            QuadRing(-2 ** 63 - 1)


class TestProperties:
    """Tests for the derived properties"""

    def test_half_integers(self):
        """Half-integers exist iff d = 1 (mod 4)"""
        assert not QuadRing(-1).has_half_integers
        assert not QuadRing(-2).has_half_integers
        assert QuadRing(-3).has_half_integers
        assert not QuadRing(-5).has_half_integers
        assert QuadRing(-7).has_half_integers
        assert QuadRing(-15).has_half_integers

    def test_abs_radicand(self):
        """|d| and its square root"""
        assert QuadRing(-7).abs_radicand == 7
        assert QuadRing(-7).abs_radicand_sqrt == pytest.approx(2.6457513111)

    def test_discriminant(self):
        """d or 4d"""
        assert QuadRing(-1).discriminant == -4
        assert QuadRing(-2).discriminant == -8
        assert QuadRing(-3).discriminant == -3
        assert QuadRing(-5).discriminant == -20
        assert QuadRing(-163).discriminant == -163

    def test_euclidean_and_ufd(self):
        """The two fixed tables"""
        assert sorted(NORM_EUCLIDEAN_RADICANDS) == [-11, -7, -3, -2, -1]
        assert sorted(HEEGNER_NUMBERS) == [-163, -67, -43, -19, -11, -7, -3, -2, -1]

        assert QuadRing(-11).is_norm_euclidean and QuadRing(-11).is_ufd
        assert not QuadRing(-19).is_norm_euclidean and QuadRing(-19).is_ufd
        assert not QuadRing(-5).is_norm_euclidean and not QuadRing(-5).is_ufd


class TestEq:
    """Tests for __eq__ and __hash__"""

    def test_main(self):
        """Rings are equal iff their radicands are"""
        assert QuadRing(-5) == QuadRing(-5)
        assert QuadRing(-5) != QuadRing(-3)
        assert QuadRing(-5) != -5
        assert len({QuadRing(-5), QuadRing(-5), QuadRing(-7)}) == 2

    def test_repr(self):
        """repr shows the radicand"""
        assert repr(QuadRing(-5)) == "QuadRing(-5)"


class TestLabels:
    """Tests for the ring labels"""

    def test_str(self):
        """Unicode labels"""
        assert str(QuadRing(-1)) == "Z[i]"
        assert str(QuadRing(-3)) == "Z[ω]"
        assert str(QuadRing(-7)) == "O_(Q(√-7))"
        assert str(QuadRing(-5)) == "Z[√-5]"

    def test_ascii(self):
        """ASCII labels"""
        assert QuadRing(-1).to_ascii() == "Z[i]"
        assert QuadRing(-3).to_ascii() == "Z[omega]"
        assert QuadRing(-7).to_ascii() == "O_(Q(sqrt(-7)))"
        assert QuadRing(-5).to_ascii() == "Z[sqrt(-5)]"

    def test_tex(self):
        """TeX labels in both bold styles"""
        assert QuadRing(-1).to_tex() == "\\mathbb Z[i]"
        assert QuadRing(-3).to_tex() == "\\mathbb Z[\\omega]"
        assert QuadRing(-7).to_tex() == "\\mathcal O_{\\mathbb Q(\\sqrt{-7})}"
        assert QuadRing(-5).to_tex() == "\\mathbb Z[\\sqrt{-5}]"

        assert QuadRing(-5).to_tex(PLAIN_BOLD) == "\\textbf Z[\\sqrt{-5}]"
        assert QuadRing(-7).to_tex(PLAIN_BOLD) == "\\mathcal O_{\\textbf Q(\\sqrt{-7})}"

    def test_html(self):
        """HTML labels in both bold styles"""
        assert QuadRing(-1).to_html() == "ℤ[<i>i</i>]"
        assert QuadRing(-3).to_html() == "ℤ[ω]"
        assert QuadRing(-7).to_html() == "<i>O</i><sub>ℚ(&radic;(-7))</sub>"
        assert QuadRing(-5).to_html() == "ℤ[&radic;-5]"

        assert QuadRing(-1).to_html(PLAIN_BOLD) == "<b>Z</b>[<i>i</i>]"

    def test_filename(self):
        """File name friendly labels"""
        assert QuadRing(-1).to_filename() == "ZI"
        assert QuadRing(-2).to_filename() == "ZI2"
        assert QuadRing(-3).to_filename() == "ZW"
        assert QuadRing(-7).to_filename() == "OQI7"
        assert QuadRing(-10).to_filename() == "ZI10"
