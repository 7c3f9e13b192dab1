"""Skyline queries over products: several strategies with the same result set.

A product belongs to the skyline when no other product dominates it (see
:func:`skyquery.product.dominates`). The strategies differ only in how they
keep the candidates and so in the order of the products they return.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Mapping, Sequence

from skyquery.product import Product, dominates


def skyline_nested(products: Sequence[Product]) -> list[Product]:
    """Compare every product with every other one.

    Products are returned in input order.
    """
    return [
        candidate
        for index, candidate in enumerate(products)
        if not any(
            other_index != index and dominates(other, candidate)
            for other_index, other in enumerate(products)
        )
    ]


def skyline_incremental(products: Iterable[Product]) -> list[Product]:
    """Keep a running skyline, dropping members a newcomer dominates.

    A product that enters the skyline is appended after the surviving members.
    """
    skyline: list[Product] = []
    for current in products:
        if any(dominates(member, current) for member in skyline):
            continue
        skyline = [member for member in skyline if not dominates(current, member)]
        skyline.append(current)
    return skyline


def skyline_by_id(products: Mapping[int, Product]) -> dict[int, Product]:
    """Compute the skyline of products keyed by id, visiting ids in order.

    The result is keyed by id and ordered by id.
    """
    skyline: dict[int, Product] = {}
    for product_id in sorted(products):
        product = products[product_id]
        if any(dominates(member, product) for member in skyline.values()):
            continue
        for beaten in [key for key, member in skyline.items() if dominates(product, member)]:
            del skyline[beaten]
        skyline[product_id] = product
    return dict(sorted(skyline.items()))


def skyline_queue(products: Iterable[Product]) -> list[Product]:
    """Rotate the candidate queue once per product, dropping what it dominates.

    Products are returned in the order they leave the queue.
    """
    queue: deque[Product] = deque()
    for product in products:
        dominated = False
        for _ in range(len(queue)):
            current = queue.popleft()
            if dominates(current, product):
                dominated = True
                queue.append(current)
            elif not dominates(product, current):
                queue.append(current)
        if not dominated:
            queue.append(product)
    return list(queue)


def skyline_stack(products: Iterable[Product]) -> list[Product]:
    """Scan the candidate stack from the top for each product.

    The scan stops at the first member that dominates the product. Products
    are returned in the order they are popped off the final stack.
    """
    stack: list[Product] = []
    for product in products:
        kept: list[Product] = []
        dominated = False
        while stack:
            top = stack.pop()
            if dominates(top, product):
                dominated = True
                kept.append(top)
                break
            if not dominates(product, top):
                kept.append(top)
        if not dominated:
            kept.append(product)
        stack.extend(reversed(kept))
    return stack[::-1]