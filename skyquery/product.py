"""Product records, the dominance relation and CSV loading."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class MalformedRowError(ValueError):
    """Raised when a CSV row is incomplete or holds an unparsable number."""


@dataclass(frozen=True)
class Product:
    """A product with a price (lower is better) and a rating (higher is better)."""

    id: int
    label: str
    price: Number
    rating: Number


def dominates(a: Product, b: Product) -> bool:
    """Return True if ``a`` is at least as good as ``b`` on both attributes
    and strictly better on at least one."""
    return (a.price <= b.price and a.rating >= b.rating) and (
        a.price < b.price or a.rating > b.rating
    )


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise MalformedRowError(f"not an integer: {text!r}")
    return int(match.group(1))


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise MalformedRowError(f"not a number: {text!r}")
    return float(match.group(1))


def _parse(line: str, number: Callable[[str], Number]) -> Product:
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < 4:
        raise MalformedRowError(f"incomplete row: {line!r}")
    id_text, label, price_text, rating_text = fields[:4]
    return Product(
        id=_leading_int(id_text),
        label=label,
        price=number(price_text),
        rating=number(rating_text),
    )


def parse_row(line: str) -> Product:
    """Parse ``id,label,price,rating`` with integer attributes.

    Extra fields are ignored; each number is read from the start of its field.
    """
    return _parse(line, _leading_int)


def read_products(
    path: Union[str, PathLike], limit: int | None = None
) -> list[Product]:
    """Read products from a CSV file with a header line, in file order.

    Rows that cannot be parsed are logged and skipped. At most ``limit``
    products are returned when a limit is given.
    """
    products: list[Product] = []
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            if limit is not None and len(products) >= limit:
                break
            try:
                products.append(parse_row(line))
            except MalformedRowError as exc:
                logger.warning("skipping row %r: %s", line.rstrip("\r\n"), exc)
    return products


def read_products_by_id(path: Union[str, PathLike]) -> dict[int, Product]:
    """Read products keyed by id, ordered by id, with float attributes.

    A later row with the same id replaces an earlier one. Malformed rows
    raise :class:`MalformedRowError`.
    """
    products: dict[int, Product] = {}
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            product = _parse(line, _leading_float)
            products[product.id] = product
    return dict(sorted(products.items()))