"""Command line front end: read a product CSV and print its skyline."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from skyquery.algorithms import (
    skyline_by_id,
    skyline_incremental,
    skyline_nested,
    skyline_queue,
    skyline_stack,
)
from skyquery.product import MalformedRowError, Product, read_products, read_products_by_id
from skyquery.timer import measure

DEFAULT_CSV = "../materials/ind_1000_2_product.csv"
MAX_PRODUCTS = 1000

METHODS = ("array", "linkedlist", "hash", "map", "queue", "stack")

_TIME_NAMES = {
    "array": "Array",
    "linkedlist": "Linked List",
    "hash": "Hash",
    "map": "Map",
    "queue": "Queue",
    "stack": "Stack",
}


def _number(value: int | float) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def format_lines(products: Iterable[Product]) -> list[str]:
    """Render each product as one ``ID: .., Label: ..`` line."""
    return [
        f"ID: {p.id}, Label: {p.label}, Harga: {_number(p.price)}, "
        f"Nilai Ulasan: {_number(p.rating)}"
        for p in products
    ]


def _format_stack_lines(products: Iterable[Product]) -> list[str]:
    return [
        f"ID: {p.id}, Label: {p.label}, Harga: {_number(p.price)}, "
        f"Rating: {_number(p.rating)}"
        for p in products
    ]


def _format_map_lines(products: Iterable[Product]) -> list[str]:
    return [
        f"ID: {p.id}, Nama: {p.label}, Harga: {_number(p.price)}, "
        f"Rating: {_number(p.rating)}"
        for p in products
    ]


def format_table(products: Iterable[Product]) -> list[str]:
    """Render products as a left-aligned table with a header and a rule."""
    lines = [f"{'ID':<4}{'Label':<15}{'Harga':<8}{'Ulasan':<8}", "-" * (4 + 15 + 8 + 8)]
    lines.extend(
        f"{p.id!s:<4}{p.label:<15}{_number(p.price):<8}{_number(p.rating):<8}"
        for p in products
    )
    return lines


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyquery", description="Print the skyline of a product CSV file."
    )
    parser.add_argument("csv", nargs="?", default=DEFAULT_CSV, help="product CSV file")
    parser.add_argument(
        "-m",
        "--method",
        choices=METHODS,
        default="linkedlist",
        help="skyline strategy to run (default: linkedlist)",
    )
    return parser


def _run(method: str, path: str) -> tuple[list[str], float]:
    if method == "map":
        by_id = read_products_by_id(path)
        skyline, seconds = measure(skyline_by_id, by_id)
        return ["Produk-produk hasil skyline query:", *_format_map_lines(skyline.values())], seconds

    if method == "array":
        products = read_products(path, MAX_PRODUCTS)
        skyline, seconds = measure(skyline_nested, products)
        return ["Skyline Products (Baju Terbaik):", *format_lines(skyline)], seconds

    products = read_products(path)
    if method == "queue":
        skyline, seconds = measure(skyline_queue, products)
        lines = [f"Total baris: {len(products)}", "=== Hasil Skyline ===", *format_table(skyline)]
        return lines, seconds
    if method == "stack":
        skyline, seconds = measure(skyline_stack, products)
        return ["Skyline Result (via Stack):", *_format_stack_lines(skyline)], seconds

    skyline, seconds = measure(skyline_incremental, products)
    return ["Skyline Products (Baju Terbaik):", *format_lines(skyline)], seconds


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        lines, seconds = _run(args.method, args.csv)
    except OSError as exc:
        print(f"Gagal membuka file {args.csv}: {exc}", file=sys.stderr)
        return 1
    except MalformedRowError as exc:
        print(f"Baris tidak valid: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    micros = int(seconds * 1_000_000)
    print(f"\nWaktu komputasi {_TIME_NAMES[args.method]}: {micros} us")
    return 0


if __name__ == "__main__":
    sys.exit(main())