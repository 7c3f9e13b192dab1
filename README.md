# skyquery

`skyquery` runs skyline queries over a product catalogue. It returns the
products that no other product dominates. A product dominates another when it
is no more expensive and rated no lower, and is strictly better on at least one
of the two.

## Input

A CSV file with a header line, then one product per line:

```
id,label,price,rating
1,Kemeja Flanel,120000,4
2,Kaos Polos,50000,3
3,Jaket Denim,250000,5
```

Only the first four comma-separated fields are used: an id, a label, a price
and a rating; further fields are ignored. The header line is always skipped.
Each number is read from the start of its field, so `42abc` reads as `42`.

## Command line

```
skyquery products.csv
skyquery products.csv --method queue
```

The CSV argument is optional and defaults to
`../materials/ind_1000_2_product.csv`, relative to the current directory.
`-m/--method` picks the strategy: `array`, `linkedlist` (the default), `hash`,
`map`, `queue` or `stack`.

The command prints a heading, the skyline products, and then a line such as
`Waktu komputasi Linked List: 123 us` with the time the query alone took, in
microseconds. The layout depends on the method:

- `array`, `linkedlist`, `hash`: one line per product,
  `ID: .., Label: .., Harga: .., Nilai Ulasan: ..`. `array` reads at most the
  first 1000 products.
- `stack`: the same, with `Rating:` in place of `Nilai Ulasan:`.
- `queue`: the number of rows read, then a fixed-width table with columns
  `ID`, `Label`, `Harga`, `Ulasan`.
- `map`: products keyed by id, printed in id order as
  `ID: .., Nama: .., Harga: .., Rating: ..`. Price and rating are read as
  decimal numbers, and a later row with the same id replaces an earlier one.

For every method but `map`, rows that are incomplete or do not parse are
logged as warnings and left out. With `map`, such a row stops the command with
an error message and exit status 1. A file that cannot be opened also gives
exit status 1.

## Library

```python
from skyquery.product import Product, dominates, read_products
from skyquery.algorithms import skyline_incremental
from skyquery.timer import measure

products = read_products("products.csv")
best, seconds = measure(skyline_incremental, products)
for p in best:
    print(p.id, p.label, p.price, p.rating)
```

`skyquery.product`:

- `Product` is a frozen dataclass with `id`, `label`, `price` and `rating`.
- `dominates(a, b)` tells whether `a` dominates `b`.
- `parse_row(line)` parses one `id,label,price,rating` line with integer
  attributes, raising `MalformedRowError` (a `ValueError`) on a bad row.
- `read_products(path, limit=None)` reads a file in file order, skipping and
  logging bad rows, returning at most `limit` products when a limit is given.
- `read_products_by_id(path)` reads a file into a dict keyed by id, ordered by
  id, with float attributes; a bad row raises `MalformedRowError`.

`skyquery.algorithms` has several ways to compute the same skyline:

- `skyline_nested(products)` compares every product with every other product
  and keeps input order.
- `skyline_incremental(products)` keeps a running skyline and drops members a
  new product dominates.
- `skyline_by_id(products)` takes a mapping of id to product and returns the
  skyline keyed by id, in id order.
- `skyline_queue(products)` cycles candidates through a FIFO queue.
- `skyline_stack(products)` keeps candidates on a stack.

They differ in the order of the results, not in which products make up the
skyline.

`skyquery.cli` also exposes `format_lines(products)` and
`format_table(products)`, which return the printed lines as a list of strings.

`skyquery.timer.Timer` starts timing when it is created; `stop()` returns the
seconds elapsed and stores them in `elapsed`. It can also be used as a context
manager, which restarts the clock on entry and stops it on exit.
`measure(func, *args, **kwargs)` calls `func` and returns its result together
with the seconds the call took.

## Limits

Only two attributes are compared: price (lower is better) and rating (higher
is better). There is no way to choose other columns or add more dimensions,
and no sample catalogue ships with the package.

## Tests

```
pip install -e ".[test]"
pytest
```