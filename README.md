# calist

A list container whose items all share one type descriptor. The list stores
its own copy of every item it receives, and it compares, prints and sorts
items through that descriptor.

## Installing

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Type descriptors

`calist.ctype` provides the `CType` class and one shared descriptor for each
common kind of value:

- `ctype_int()`, `ctype_long()` and `ctype_size_t()` for integers. `dup`
  rejects values that are not integers and values outside the native range.
- `ctype_char()` for single-character strings.
- `ctype_bool()` for booleans.
- `ctype_float()` and `ctype_double()` for numbers. The float descriptor
  rounds each value to single precision.
- `ctype_string()` for text.

Each call returns the same object every time. Descriptors compare equal only
when they are the same object.

Every descriptor has `name` and `size` attributes and four operations:

- `dup(value)` returns a checked, independent copy of the value.
- `format(value)` returns the value as text. Booleans appear as `true` and
  `false`, and floats use `%g`-style formatting.
- `print(value, file=None)` writes the formatted value to `file`, or to
  standard output when no file is given.
- `compare(a, b)` returns a negative number, zero or a positive number.

Each of these operations raises `ValueError` when it is given `None`.

You can build your own descriptor with
`CType(name, size, dup=None, format=None, compare=None)`. Any operation you
leave out falls back to a default: `copy.deepcopy`, `str`, or the natural
ordering of the values.

## The list

```python
from calist.calist import CAList
from calist.ctype import ctype_int

al = CAList(ctype_int())
for n in (5, 10, 20, 30):
    al.append(n)
print(al)                      # [5, 10, 20, 30]

al.insert(2, 5)
al.insert_front(35)
copy = al.copy()
assert copy == al

al.pop(2)
al.remove_all(5)
al.remove_if(lambda x: x % 2 == 0)

al.extend(copy)
al.sort()
al.bsearch(30)                 # an index of 30 in the sorted list, or None
al.reverse()
al.foreach(lambda x: x * 3)    # a returned value replaces the item
al.remove_dup()                # number of duplicates removed
```

`CAList(ctype, capacity=1)` supports the following:

- `len()`, iteration, `in`, `==`, `str()`, and indexing with `[]` for both
  reading and assigning.
- Access: `get`, `set` and `swap`.
- Adding items: `append`, `extend`, `insert`, `insert_front` and
  `insert_all`. `extend` and `insert_all` take either another list of the
  same type or any iterable.
- Removing items: `pop`, `remove`, `remove_last`, `remove_all`, `remove_if`,
  `remove_range` and `clear`.
- Searching: `index`, `index_last`, `index_all`, `index_all_if` and `count`.
  `index` and `index_last` return `None` when the item is absent.
  `index_all` and `index_all_if` return a new `size_t` list of positions.
- Replacing items: `replace`, `replace_last`, `replace_all` and `replace_if`.
- Ordering: `sort`, `bsearch` and `reverse`.
- New lists built from this one: `copy`, `slice`, `filter` and `unique`.
- Other operations: `foreach`, `remove_dup`, `is_empty` and
  `print(file=None)`.
- Capacity: the `capacity` property, `reserve` and `reclaim`. The capacity
  is a count the list keeps. It doubles when an insertion finds the list
  full, but it reserves no memory.

Items are equal when the descriptor's `compare` returns zero.

Calls that break the rules raise an exception and leave the list unchanged:

- An index out of range raises `IndexError`.
- Removing by value from an empty list raises `ValueError`.
- Mixing two lists whose descriptors differ raises `TypeError`.

## Demo

The demo runs a sample session on an integer list and prints the list after
each step:

```
calist-demo
```

`calist.demo.run_demo(file=None)` runs the same session and returns the
final list.