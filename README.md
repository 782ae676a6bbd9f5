# rdbkit

rdbkit is a set of small data structures and helpers for building a toy relational database engine. It has no dependencies.

## Modules

### `rdbkit.avltree`

`AVLTree(cmp=None)` is a height-balanced binary search tree.

- `cmp(existing, key)` returns a negative number, zero or a positive number. If you leave it out, items are compared with `<` and `>`.
- `insert(item)` returns `None` on success. If an equal item is already stored, the tree is left as it is and that stored item is returned.
- `lookup(key)` returns the stored item equal to `key`, or `None` if there is none.
- `remove(key)` removes the matching item and returns it. It raises `KeyError` if no item matches.
- `replace(old, new)` puts `new` in the place of the item equal to `old` and returns the old item. The tree is not rebalanced, so `new` should sort the same as `old`. It raises `KeyError` if no item matches.
- `first()` and `last()` return `AVLNode` objects, or `None` when the tree is empty. Each node exposes `item`, and `next()` and `prev()` walk the nodes in order.
- `is_empty()` tells whether the tree holds no items. `height()` returns -1 for an empty tree and 0 for a tree with one node.
- `len(tree)` gives the number of items.
- Iterating over the tree yields the items in order. You may remove the current item while iterating.

### `rdbkit.hashtable`

`Hashtable(minsize=0, hashfn=None, eqfn=None)` is a hash table with separate chaining.

- The bucket count is the first prime in a fixed series that is larger than `minsize`. A `minsize` above 2**30 raises `HashtableFullError`.
- The table grows to the next prime once the entry count passes 65% of the bucket count.
- `hashfn` defaults to Python's `hash` and `eqfn` defaults to `==`.
- `insert(key, value)` adds an entry. It does not replace an existing entry with an equal key.
- `search(key)` returns the value for `key`, or `None` if there is none.
- `remove(key)` removes the entry and returns its value. It raises `KeyError` if the key is absent.
- `count()` and `len()` give the number of entries.
- `items()` yields `(key, value)` pairs, and iterating over the table yields the keys.
- The table also supports `key in table` and `table[key]`. `table[key]` raises `KeyError` if the key is absent.
- `mix_hash(value)` scrambles a 32-bit hash value, which protects the table against weak hash functions.

### `rdbkit.hashtable_powers`

`PowerOfTwoHashtable` is the same table with a different sizing rule.

- Its bucket count is the smallest power of two that is not below `minsize`, and it doubles when the table grows.
- Its `remove` matches entries by the equality function alone.

### `rdbkit.hashtable_utility`

`change(table, key, value)` rebinds a key that is already stored. It returns `True` if it replaced the value. It returns `False`, and leaves the table unchanged, if the key is absent.

### `rdbkit.hashtable_itr`

`HashtableIterator(table)` is a cursor over a table's entries. It moves bucket by bucket.

- `key()` and `value()` read the current entry. They raise `LookupError` once the cursor is exhausted.
- `advance()` moves to the next entry and returns `False` at the end.
- `remove()` deletes the current entry and moves to the next one. It returns `False` when no entry follows.
- `search(table, key)` points the cursor at the matching entry. It returns `False`, and leaves the cursor where it was, if no entry matches.

### `rdbkit.tracer`

`Tracer(name, file_name=None, header=None, out=None, bits=0)` writes messages whose bit is enabled.

- Output goes to a file, to a stream (standard output by default), or to both.
- Nothing is written until `enable_file_logging(True)` or `enable_console_logging(True)` is called.
- `trace(bit, fmt, *args)` formats `fmt % args` and writes it after the header and the name and line number of the calling function. The text is cut to 255 characters. It returns the text written, or `None` if nothing was written.
- `disable_header_print()` leaves the header off the next message only.
- `set_bit`, `unset_bit` and `is_bit_set` manage the bit mask.
- `clear_log_file()` empties the log file.
- `console_logging_enabled()` and `file_logging_enabled()` report which outputs are on.
- `close()` closes the log file. A tracer is also a context manager, and leaving the `with` block closes it.
- `active_tracers()` lists the tracers that are still open, newest first.

### `rdbkit.sql_enums`

This module holds the integer token codes of the SQL front end as `IntEnum` classes: `EntityType`, `QueryType`, `AggFn`, `Keyword`, `Operator`, `Dtype`, `DtypeAttr`, `ValueType`, `MathFn`, `Order` and `Misc`.

It also has these helpers:

- `is_valid_dtype(dtype)` tells whether a code is one of the column types a table may use.
- `dtype_name(dtype)` returns the printable name of a column type, such as `"SQL_INT"`, or `None`.
- `dtype_size(dtype)` returns the size in bytes, or 0.
- `agg_fn_name(agg_fn)` returns the SQL spelling, such as `"sum"`, or `""`.

## What this package does not do

rdbkit offers the building blocks only. It has no SQL lexer, parser or query engine. It does not store tables, and it has no command-line prompt. `rdbkit.sql_enums` defines token codes but nothing that reads SQL text.

## Example

```python
from rdbkit.avltree import AVLTree

def by_magnitude(a, b):
    ma, mb = a[0] ** 2 + a[1] ** 2, b[0] ** 2 + b[1] ** 2
    return (ma > mb) - (ma < mb)

tree = AVLTree(by_magnitude)
for pair in [(10, 5), (1, 5), (7, 5)]:
    tree.insert(pair)

print(list(tree))            # [(1, 5), (7, 5), (10, 5)]
print(tree.lookup((7, 5)))   # (7, 5)
```

```python
from rdbkit.hashtable import Hashtable

table = Hashtable(16, hash, lambda a, b: a == b)
table.insert("alpha", 1)
print(table.search("alpha"))  # 1
print(len(table))             # 1
```

## Running the tests

```
pip install .[test]
pytest
```