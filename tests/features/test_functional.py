"""Tests for functional interface wrappers"""

import pytest

from funcdemo.errors import InvalidInputError
from funcdemo.features.functional import Consumer, Function, Predicate, Supplier


class TestPredicate:
    """Test Predicate evaluation and composition"""

    def test_test_returns_bool(self):
        """Truthy results are normalized to bool"""
        pred = Predicate(lambda n: n % 2)
        assert pred.test(3) is True
        assert pred.test(4) is False

    def test_callable(self):
        """Predicates can be called like plain functions"""
        even = Predicate(lambda n: n % 2 == 0)
        assert list(filter(even, [1, 2, 3, 4])) == [2, 4]

    def test_and_or_negate(self):
        """Composition follows boolean logic"""
        even = Predicate(lambda n: n % 2 == 0)
        positive = Predicate(lambda n: n > 0)

        assert even.and_(positive).test(4) is True
        assert even.and_(positive).test(-4) is False
        assert even.or_(positive).test(3) is True
        assert even.or_(positive).test(-3) is False
        assert even.negate().test(3) is True

    def test_and_short_circuits(self):
        """Second predicate is not evaluated when the first is false"""
        calls = []

        def record(n):
            calls.append(n)
            return True

        Predicate(lambda n: False).and_(record).test(1)
        assert calls == []

    def test_static_helpers(self):
        """is_equal and not_ build predicates"""
        assert Predicate.is_equal("x").test("x") is True
        assert Predicate.is_equal("x").test("y") is False
        assert Predicate.not_(str.isdigit).test("abc") is True

    def test_of_returns_same_predicate(self):
        """Wrapping an existing Predicate does not re-wrap it"""
        pred = Predicate(bool)
        assert Predicate.of(pred) is pred

    def test_rejects_non_callable(self):
        """Constructing from a non-callable raises InvalidInputError"""
        with pytest.raises(InvalidInputError):
            Predicate(42)


class TestFunction:
    """Test Function application and composition"""

    def test_apply(self):
        """Function applies its callable"""
        assert Function(len).apply("lambda") == 6

    def test_and_then_and_compose_order(self):
        """and_then runs after, compose runs before"""
        add_one = Function(lambda n: n + 1)
        double = lambda n: n * 2

        assert add_one.and_then(double).apply(3) == 8
        assert add_one.compose(double).apply(3) == 7

    def test_identity(self):
        """Identity returns its argument unchanged"""
        value = object()
        assert Function.identity().apply(value) is value


class TestConsumer:
    """Test Consumer side effects"""

    def test_and_then_runs_both_in_order(self):
        """Chained consumers see the same argument in order"""
        seen = []
        chained = Consumer(lambda v: seen.append(("first", v))).and_then(
            lambda v: seen.append(("second", v))
        )

        result = chained.accept("a")

        assert result is None
        assert seen == [("first", "a"), ("second", "a")]


class TestSupplier:
    """Test Supplier invocation and memoization"""

    def test_get_invokes_each_time(self):
        """Plain supplier evaluates on every call"""
        counter = iter(range(10))
        supplier = Supplier(lambda: next(counter))
        assert [supplier.get() for _ in range(3)] == [0, 1, 2]

    def test_memoize_evaluates_once(self):
        """Memoized supplier caches the first value"""
        calls = []

        def factory():
            calls.append(1)
            return "value"

        memoized = Supplier(factory).memoize()

        assert memoized() == "value"
        assert memoized() == "value"
        assert len(calls) == 1
