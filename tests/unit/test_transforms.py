"""
Тесты для Transforms — apply / filter_seq / fold / compose

Проверяемые инварианты:
1. Вход не мутируется, выход — новый список
2. apply сохраняет длину и позиции
3. filter_seq сохраняет порядок, пустой результат — [] (не None)
4. fold слева направо, fold([], k, op) == k
5. compose: f внешняя, g внутренняя
"""

import operator

import pytest

from closurekit.pipeline import apply, compose, compose_many, filter_seq, fold


@pytest.fixture
def numbers():
    """Фиксированная последовательность 1..10."""
    return list(range(1, 11))


# =============================================================================
# ТЕСТЫ: apply
# =============================================================================


class TestApply:
    """Тесты apply."""

    def test_elementwise(self, numbers):
        result = apply(numbers, lambda x: x * x)
        assert len(result) == len(numbers)
        for i, n in enumerate(numbers):
            assert result[i] == n * n

    def test_input_unchanged(self, numbers):
        snapshot = list(numbers)
        result = apply(numbers, lambda x: x + 1)
        assert numbers == snapshot
        assert result is not numbers

    def test_empty(self):
        assert apply([], lambda x: x * 100) == []

    def test_accepts_tuple(self):
        assert apply((1, 2, 3), lambda x: -x) == [-1, -2, -3]


# =============================================================================
# ТЕСТЫ: filter_seq
# =============================================================================


class TestFilterSeq:
    """Тесты filter_seq."""

    def test_keeps_matching_in_order(self, numbers):
        result = filter_seq(numbers, lambda x: x % 2 == 0)
        assert result == [2, 4, 6, 8, 10]

    def test_every_element_satisfies_predicate(self):
        seq = [5, -3, 8, 0, 12, -1, 7]
        pred = lambda x: x > 0  # noqa: E731
        result = filter_seq(seq, pred)
        assert all(pred(x) for x in result)
        assert result == [5, 8, 12, 7]

    def test_no_matches_returns_empty_list(self, numbers):
        result = filter_seq(numbers, lambda x: x > 100)
        assert result == []
        assert result is not None

    def test_empty(self):
        assert filter_seq([], lambda x: True) == []

    def test_input_unchanged(self, numbers):
        snapshot = list(numbers)
        filter_seq(numbers, lambda x: x < 3)
        assert numbers == snapshot


# =============================================================================
# ТЕСТЫ: fold
# =============================================================================


class TestFold:
    """Тесты fold."""

    def test_sum(self):
        assert fold([1, 2, 3, 4], 0, operator.add) == 10

    def test_product(self):
        assert fold([1, 2, 3, 4], 1, operator.mul) == 24

    @pytest.mark.parametrize("initial", [0, 1, -9, 1000])
    def test_empty_returns_initial(self, initial):
        assert fold([], initial, operator.mul) == initial

    def test_left_to_right_order(self):
        """Некоммутативная op: ((0 - 1) - 2) - 3."""
        assert fold([1, 2, 3], 0, operator.sub) == -6

    def test_order_of_visits(self):
        visited = []

        def record(acc, cur):
            visited.append(cur)
            return acc + cur

        fold([3, 1, 2], 0, record)
        assert visited == [3, 1, 2]


# =============================================================================
# ТЕСТЫ: compose
# =============================================================================


class TestCompose:
    """Тесты compose / compose_many."""

    def test_inner_applied_first(self):
        """compose(x+10, x*2)(5) == 20."""
        h = compose(lambda x: x + 10, lambda x: x * 2)
        assert h(5) == 20

    def test_not_commutative(self):
        add_ten = lambda x: x + 10  # noqa: E731
        double = lambda x: x * 2  # noqa: E731
        assert compose(add_ten, double)(5) == 20
        assert compose(double, add_ten)(5) == 30

    def test_compose_many_right_to_left(self):
        h = compose_many(lambda x: x + 1, lambda x: x * 3, lambda x: x - 2)
        assert h(10) == (10 - 2) * 3 + 1

    def test_compose_many_empty_is_identity(self):
        identity = compose_many()
        assert identity(17) == 17

    def test_compose_many_single(self):
        assert compose_many(lambda x: x * 5)(3) == 15

    def test_exceptions_propagate(self):
        def boom(x):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            compose(lambda x: x, boom)(1)
