import random

import pytest

from skyquery.algorithms import (
    skyline_by_id,
    skyline_incremental,
    skyline_nested,
    skyline_queue,
    skyline_stack,
)
from skyquery.product import Product, dominates

LIST_STRATEGIES = [skyline_nested, skyline_incremental, skyline_queue, skyline_stack]


def _random_products(seed, count=60):
    rng = random.Random(seed)
    return [
        Product(id=i, label=f"item{i}", price=rng.randint(1, 30), rating=rng.randint(1, 30))
        for i in range(1, count + 1)
    ]


A = Product(1, "a", 10, 5)
B = Product(2, "b", 20, 4)
C = Product(3, "c", 5, 3)
D = Product(4, "d", 30, 9)


@pytest.mark.parametrize("strategy", LIST_STRATEGIES)
def test_worked_example(strategy):
    result = strategy([A, B, C, D])
    assert sorted(p.id for p in result) == [A.id, C.id, D.id]


def test_empty_input():
    assert skyline_nested([]) == []
    assert skyline_incremental([]) == []
    assert skyline_queue([]) == []
    assert skyline_stack([]) == []
    assert skyline_by_id({}) == {}


@pytest.mark.parametrize("strategy", LIST_STRATEGIES)
def test_single_product(strategy):
    assert strategy([A]) == [A]


@pytest.mark.parametrize("strategy", LIST_STRATEGIES)
def test_equal_products_both_kept(strategy):
    twin = Product(9, "twin", A.price, A.rating)
    result = strategy([A, twin])
    assert set(result) == {A, twin}


@pytest.mark.parametrize("strategy", LIST_STRATEGIES)
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_skyline_invariants(strategy, seed):
    products = _random_products(seed)
    result = strategy(products)
    members = set(result)
    assert len(members) == len(result)
    for member in result:
        assert not any(dominates(other, member) for other in products)
    for product in products:
        if product not in members:
            assert any(dominates(member, product) for member in result)


@pytest.mark.parametrize("seed", [5, 6, 7])
def test_strategies_agree_on_members(seed):
    products = _random_products(seed)
    expected = set(skyline_nested(products))
    for strategy in LIST_STRATEGIES[1:]:
        assert set(strategy(products)) == expected


def test_nested_keeps_input_order():
    products = _random_products(11)
    result = skyline_nested(products)
    positions = [products.index(p) for p in result]
    assert positions == sorted(positions)


def test_incremental_appends_newcomer_after_survivors():
    x = Product(1, "x", 10, 5)
    y = Product(2, "y", 20, 9)
    z = Product(3, "z", 5, 6)
    assert skyline_incremental([x, y, z]) == [y, z]
    assert skyline_queue([x, y, z]) == [y, z]


def test_queue_matches_incremental_order():
    products = _random_products(21)
    assert skyline_queue(products) == skyline_incremental(products)


def test_stack_worked_order():
    assert skyline_stack([A, B, C, D]) == [A, C, D]


def test_dominated_first_product_is_removed():
    assert skyline_stack([B, A]) == [A]
    assert skyline_incremental([B, A]) == [A]


def test_skyline_by_id_is_sorted_dict():
    products = {p.id: p for p in [D, B, C, A]}
    result = skyline_by_id(products)
    assert list(result) == [A.id, C.id, D.id]
    assert result[C.id] == C


def test_skyline_by_id_matches_nested():
    products = _random_products(31)
    by_id = {p.id: p for p in products}
    assert set(skyline_by_id(by_id).values()) == set(skyline_nested(products))


def test_skyline_by_id_float_attributes():
    cheap = Product(1, "cheap", 1.5, 2.5)
    worse = Product(2, "worse", 1.5, 2.0)
    assert skyline_by_id({1: cheap, 2: worse}) == {1: cheap}