import logging

import pytest

from quadint import (
    AlgebraicDegreeOverflowError,
    GCDAttempt,
    GCDResult,
    NonEuclideanDomainError,
    NotDivisibleError,
    RecoverableError,
    best_effort_gcd,
    euclidean_gcd,
    quadint,
    try_anyway,
)


def divides(g: quadint, x: quadint) -> bool:
    """Whether x / g is exact"""
    try:
        x / g
    except NotDivisibleError:
        return False
    return True


class TestEuclideanGCD:
    """Tests for euclidean_gcd"""

    def test_gaussian(self):
        """5 = (1 + 2i)(1 - 2i) and 3 + i = (1 + 2i)(1 - i)"""
        assert euclidean_gcd(quadint(5, 0, -1), quadint(3, 1, -1)) == quadint(1, 2, -1)

    def test_int_operand(self):
        """A plain int joins the other operand's ring"""
        assert euclidean_gcd(5, quadint(3, 1, -1)) == quadint(1, 2, -1)
        assert euclidean_gcd(quadint(3, 1, -1), 5) == quadint(1, 2, -1)

    def test_zero(self):
        """gcd(a, 0) is a, normalized"""
        assert euclidean_gcd(quadint(-2, -1, -1), 0) == quadint(2, 1, -1)
        assert euclidean_gcd(0, quadint(0, -3, -2)) == quadint(0, 3, -2)
        assert euclidean_gcd(quadint(0, 0, -7), 0) == quadint(0, 0, -7)

    def test_agrees_with_integer_gcd_on_scalars(self):
        """For rational integers with no split primes in common this is the ordinary gcd"""
        assert euclidean_gcd(quadint(6, 0, -1), quadint(15, 0, -1)) == quadint(3, 0, -1)
        assert euclidean_gcd(quadint(-12, 0, -2), quadint(18, 0, -2)) == quadint(6, 0, -2)

    def test_recovers_constructed_common_factor(self):
        """gcd(g*x, g*y) is a multiple of g dividing both"""
        cases = {
            -1: (quadint(2, 1, -1), quadint(3, -2, -1), quadint(5, 4, -1)),
            -2: (quadint(1, 1, -2), quadint(3, 1, -2), quadint(-1, 4, -2)),
            -3: (quadint(3, 1, -3, 2), quadint(5, -1, -3, 2), quadint(4, 3, -3)),
            -7: (quadint(1, 1, -7, 2), quadint(3, 2, -7), quadint(5, -3, -7, 2)),
            -11: (quadint(1, 1, -11, 2), quadint(7, 1, -11, 2), quadint(2, -3, -11)),
        }
        for g, x, y in cases.values():
            a, b = g * x, g * y
            res = euclidean_gcd(a, b)

            assert divides(res, a)
            assert divides(res, b)
            assert divides(g, res)

    def test_normalized(self):
        """The first nonzero component is positive"""
        res = euclidean_gcd(quadint(-5, 0, -1), quadint(-3, -1, -1))
        assert res.a > 0 or (res.a == 0 and res.b > 0)

    def test_different_rings(self):
        """Operands must share a ring"""
        with pytest.raises(AlgebraicDegreeOverflowError):
            euclidean_gcd(quadint(1, 1, -1), quadint(1, 1, -2))

    def test_two_ints(self):
        """There's no ring to work in"""
        with pytest.raises(TypeError):
            euclidean_gcd(4, 6)

    def test_non_euclidean(self):
        """Z[sqrt(-5)] is not norm-Euclidean"""
        with pytest.raises(NonEuclideanDomainError) as e:
            euclidean_gcd(29, quadint(-7, 5, -5))

        assert isinstance(e.value, RecoverableError)
        assert e.value.attempt == GCDAttempt(quadint(29, 0, -5), quadint(-7, 5, -5))

    def test_ufd_but_not_euclidean(self):
        """Z[(1 + sqrt(-19))/2] is a UFD, but still refused"""
        with pytest.raises(NonEuclideanDomainError):
            euclidean_gcd(quadint(5, 0, -19), quadint(1, 1, -19, 2))


class TestTryAnyway:
    """Tests for try_anyway and best_effort_gcd"""

    def test_resolves(self):
        """gcd(29, -7 + 5sqrt(-5)) = 3 + 2sqrt(-5)"""
        with pytest.raises(NonEuclideanDomainError) as e:
            euclidean_gcd(29, quadint(-7, 5, -5))

        assert try_anyway(e.value.attempt) == GCDResult(quadint(3, 2, -5), True)

    def test_stuck(self, caplog):
        """gcd(2, 1 + sqrt(-5)) cannot be reached by the Euclidean algorithm"""
        with caplog.at_level(logging.INFO, logger="quadint.gcd"):
            res = try_anyway(GCDAttempt(quadint(2, 0, -5), quadint(1, 1, -5)))

        assert not res.reliable
        assert res.value == quadint(2, 0, -5)
        assert any(r.levelno == logging.INFO for r in caplog.records)

    def test_best_effort(self):
        """Euclidean rings are always reliable"""
        assert best_effort_gcd(5, quadint(3, 1, -1)) == GCDResult(quadint(1, 2, -1), True)
        assert best_effort_gcd(29, quadint(-7, 5, -5)) == GCDResult(quadint(3, 2, -5), True)
        assert not best_effort_gcd(2, quadint(1, 1, -5)).reliable

    def test_best_effort_different_rings(self):
        """Mixing rings is still an error"""
        with pytest.raises(AlgebraicDegreeOverflowError):
            best_effort_gcd(quadint(1, 1, -5), quadint(1, 1, -6))
