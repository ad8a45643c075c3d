import os
import sys

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hashchain.datastructures.chain import Chain


def test_chain_starts_with_first_element():
    c = Chain("a")
    assert list(c) == ["a"]
    assert len(c) == 1


def test_prepend_puts_newest_first():
    c = Chain(1)
    c.prepend(2)
    c.prepend(3)
    assert list(c) == [3, 2, 1]


def test_find_uses_equality():
    c = Chain((1, 2))
    c.prepend((3, 4))
    assert c.find((1, 2)) is True
    assert c.find((3, 4)) is True
    assert c.find((5, 6)) is False


def test_duplicates_are_kept():
    c = Chain("x")
    c.prepend("x")
    assert len(c) == 2
