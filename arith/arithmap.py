"""A mapping from string keys to numbers with elementwise arithmetic."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

logger = logging.getLogger(__name__)

ZERO = 0
"""Additive identity used for missing keys and by `prune`.
Integer 0 compares equal to the zero of int, float, Fraction, Decimal and sympy numbers."""


class ArithMap[V](dict[str, V]):
    """A dict of numbers supporting `+`, `-` and `*`.

    A scalar operand is applied to every value and never adds or removes keys.
    A mapping operand is combined key by key over the union of both key sets,
    reading a missing value as `zero`. Multiplication is scalar only.

    Unlike `Counter`, looking up an absent key still raises `KeyError`."""

    zero: ClassVar[Any] = ZERO

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, V]]) -> "ArithMap[V]":
        """Inserts `(key, value)` pairs in order. A repeated key keeps its last value."""
        result = cls()
        for key, value in pairs:
            if key in result:
                logger.debug(f"Key {key!r} given twice, overwriting with {value!r}.")
            result[key] = value
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict.__repr__(self)})"

    def copy(self) -> "ArithMap[V]":
        # dict.copy would hand back a plain dict
        return self.__class__(self)

    def prune(self) -> None:
        """Removes every entry whose value equals `zero`, in place."""
        zero_keys = [key for key, value in self.items() if value == self.zero]
        for key in zero_keys:
            del self[key]
        if zero_keys:
            logger.debug(f"Pruned {len(zero_keys)} zero entries: {zero_keys}")

    def __add__(self, other: "Mapping[str, V] | V") -> "ArithMap[V]":
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: "Mapping[str, V] | V") -> "ArithMap[V]":
        if isinstance(other, Mapping):
            for key, value in other.items():
                if key in self:
                    self[key] += value
                else:
                    self[key] = value
        else:
            for key in self:
                self[key] += other
        return self

    def __sub__(self, other: "Mapping[str, V] | V") -> "ArithMap[V]":
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: "Mapping[str, V] | V") -> "ArithMap[V]":
        if isinstance(other, Mapping):
            for key, value in other.items():
                if key in self:
                    self[key] -= value
                else:
                    self[key] = self.zero - value
        else:
            for key in self:
                self[key] -= other
        return self

    def __mul__(self, other: V) -> "ArithMap[V]":
        if isinstance(other, Mapping):
            return NotImplemented
        result = self.copy()
        result *= other
        return result

    def __imul__(self, other: V) -> "ArithMap[V]":
        if isinstance(other, Mapping):
            return NotImplemented
        for key in self:
            self[key] *= other
        return self


def arithmap[V](*pairs: tuple[str, V]) -> ArithMap[V]:
    """Builds an `ArithMap` from literal `(key, value)` pairs.

    >>> arithmap(("a", 1), ("b", 2))
    ArithMap({'a': 1, 'b': 2})
    """
    return ArithMap.from_pairs(pairs)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    x = arithmap(("a", 1), ("b", 2))
    y = arithmap(("b", 2), ("c", 3))
    print(f"{x} + {y} = {x + y}")
    print(f"{x} - {y} = {x - y}")
    print(f"{x} + 1 = {x + 1}")

    difference = x - y
    difference.prune()
    print(f"pruned: {difference}")
