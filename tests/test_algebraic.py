import pytest

from quadint import (
    HEEGNER_NUMBERS,
    InvalidArgumentError,
    NonUniqueFactorizationDomainError,
    QuadFactorization,
    QuadRing,
    factor,
    is_irreducible,
    is_prime,
    quadint,
)


def sample(d: int) -> list[quadint]:
    """Nonzero values of every shape in ring d"""
    out = [quadint(a, b, d) for a in (-6, -1, 0, 3, 10) for b in (-3, 0, 1, 5) if a or b]
    if QuadRing(d).has_half_integers:
        out.extend(quadint(a, b, d, 2) for a in (-5, 1, 9) for b in (-7, 1, 3))
    return out


class TestIsPrime:
    """Tests for is_prime on algebraic integers"""

    def test_gaussian(self):
        """3 and 1 + i are prime in Z[i], 2 and 5 are not"""
        assert is_prime(quadint(3, 0, -1))
        assert is_prime(quadint(1, 1, -1))
        assert is_prime(quadint(0, 7, -1))
        assert is_prime(quadint(2, 1, -1))
        assert not is_prime(quadint(2, 0, -1))
        assert not is_prime(quadint(5, 0, -1))
        assert not is_prime(quadint(1, 0, -1))
        assert not is_prime(quadint(0, 0, -1))

    def test_eisenstein(self):
        """2 is inert in Z[omega], 3 ramifies and 7 splits"""
        assert is_prime(quadint(2, 0, -3))
        assert is_prime(quadint(3, 1, -3, 2))
        assert not is_prime(quadint(3, 0, -3))
        assert not is_prime(quadint(7, 0, -3))
        assert is_prime(quadint(5, 1, -3, 2))

    def test_heegner(self):
        """2 is inert wherever d = 5 (mod 8)"""
        for d in (-3, -11, -19, -43, -67, -163):
            assert is_prime(quadint(2, 0, d))
        assert not is_prime(quadint(2, 0, -7))

    def test_rational(self):
        """Plain ints are tested as rational integers"""
        assert is_prime(7)
        assert is_prime(-7)
        assert not is_prime(9)

    def test_not_ufd(self):
        """2 * 3 = (1 + sqrt(-5))(1 - sqrt(-5)), so primality is undefined in Z[sqrt(-5)]"""
        x = quadint(1, 1, -5)
        with pytest.raises(NonUniqueFactorizationDomainError) as e:
            is_prime(x)

        assert e.value.number == x


class TestIsIrreducible:
    """Tests for is_irreducible"""

    def test_not_ufd(self):
        """2, 3 and 1 + sqrt(-5) are irreducible in Z[sqrt(-5)] but 6 is not"""
        assert is_irreducible(quadint(2, 0, -5))
        assert is_irreducible(quadint(3, 0, -5))
        assert is_irreducible(quadint(1, 1, -5))
        assert is_irreducible(quadint(1, -1, -5))
        assert not is_irreducible(quadint(6, 0, -5))
        assert not is_irreducible(quadint(4, 0, -5))
        assert not is_irreducible(quadint(2, 2, -5))

    def test_prime_norm(self):
        """A prime norm always means irreducible"""
        assert is_irreducible(quadint(3, 2, -5))
        assert is_irreducible(quadint(2, 1, -15))
        assert not is_irreducible(quadint(1, 1, -15, 2) * 2)

    def test_units_and_zero(self):
        """Neither units nor zero are irreducible"""
        assert not is_irreducible(quadint(0, 0, -5))
        assert not is_irreducible(quadint(-1, 0, -5))
        assert not is_irreducible(quadint(-1, 1, -3, 2))

    def test_agrees_with_is_prime_in_ufds(self):
        """In a UFD irreducibles and primes coincide"""
        for d in (-1, -2, -3, -7):
            for x in sample(d):
                if abs(x) > 1:
                    assert is_irreducible(x) == is_prime(x)


class TestFactor:
    """Tests for factor"""

    def test_gaussian(self):
        """5 = (2 + i)(2 - i)"""
        f = factor(quadint(5, 0, -1))
        assert f == QuadFactorization(quadint(1, 0, -1), (quadint(2, 1, -1), quadint(2, -1, -1)))

    def test_inert(self):
        """An inert prime is its own factorization"""
        f = factor(quadint(9, 0, -1))
        assert f.primes == (quadint(3, 0, -1), quadint(3, 0, -1))
        assert f.unit == quadint(1, 0, -1)

    def test_unit(self):
        """A unit has no prime factors"""
        f = factor(quadint(-1, 1, -3, 2))
        assert f.primes == ()
        assert f.unit == quadint(-1, 1, -3, 2)

    def test_main(self):
        """Validate factor works as expected in all nine UFDs."""
        for d in HEEGNER_NUMBERS:
            for x in sample(d):
                f = factor(x)

                assert f.prod() == x
                assert abs(f.unit) == 1
                for p in f.primes:
                    assert is_prime(p)

    def test_norms(self):
        """The prime norms multiply back to the norm"""
        x = quadint(3, 5, -163) * quadint(41, 0, -163) * quadint(1, 1, -163, 2)
        f = factor(x)

        total = 1
        for p in f.primes:
            total *= abs(p)
        assert total == abs(x)
        assert f.prod() == x

    def test_not_ufd(self):
        """Z[sqrt(-5)] has no unique factorization"""
        with pytest.raises(NonUniqueFactorizationDomainError):
            factor(quadint(6, 0, -5))

    def test_zero(self):
        """0 is out of domain"""
        with pytest.raises(InvalidArgumentError):
            factor(quadint(0, 0, -1))
