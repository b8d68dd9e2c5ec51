"""Containers with arithmetic operations support."""

from arith.arithmap import ZERO, ArithMap, arithmap

__all__ = ["ZERO", "ArithMap", "arithmap"]
