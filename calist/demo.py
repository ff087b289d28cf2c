"""Walk through the main operations of :class:`CAList` on integers."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .calist import CAList
from .ctype import ctype_int

__all__ = ["run_demo", "main"]


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _append_temporaries(al: CAList) -> None:
    a = 5
    b = 10
    al.append(a)
    al.append(b)
    al.append(20)


def _append_owned(al: CAList) -> None:
    value = [30]
    al.append(value[0])
    value.clear()


def _is_even(item: int) -> bool:
    return item % 2 == 0


def run_demo(file: Optional[TextIO] = None) -> CAList:
    """Run the demonstration, printing each stage to ``file``; return the final list."""
    out = file if file is not None else sys.stdout

    al = CAList(ctype_int())
    _append_temporaries(al)
    _append_owned(al)
    al.print(out)
    _check(len(al) == 4, "list should hold four items")

    al.insert(2, 5)
    al.insert(3, 25)
    al.insert_front(35)

    al_copy = al.copy()
    al_copy.print(out)
    _check(al == al_copy, "copy should equal the original")

    al.pop(2)
    al.remove(25)
    al.remove_all(5)
    al.remove_if(_is_even)
    al.print(out)

    al.clear()
    al.print(out)

    al.extend(al_copy)
    al.print(out)

    _check(10 in al, "10 should be present")
    _check(99 not in al, "99 should be absent")
    _check(al.index(5) == 1, "first 5 should be at position 1")
    _check(al.index_last(5) == 3, "last 5 should be at position 3")
    _check(al.index(99) is None, "99 should not be found")
    _check(al.count(5) == 2, "5 should occur twice")
    _check(al.count(99) == 0, "99 should not occur")

    _check(al.get(2) == 10, "item at position 2 should be 10")
    al[0] = 40
    al.set(5, 25)
    al.print(out)

    al.sort()
    al.print(out)
    _check(al.bsearch(30) is not None, "30 should be found by binary search")
    _check(al.bsearch(99) is None, "99 should not be found by binary search")
    al.reverse()
    al.print(out)

    factor = 3
    al.foreach(lambda item: item * factor)
    al.print(out)

    distinct = al.unique()
    distinct.print(out)
    _check(al.remove_dup() == 2, "two duplicates should be removed")
    al.print(out)
    _check(al == distinct, "deduplicated list should equal the unique list")

    return al


def main(argv: Optional[List[str]] = None) -> int:
    """Command entry point: run the demonstration on standard output."""
    parser = argparse.ArgumentParser(
        prog="calist-demo",
        description="Demonstrate the operations of a typed integer list.",
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())