"""Coefficients and the hash families built from them."""

from perfect_hash.hashing.coefficients import Coefficient, Operation
from perfect_hash.hashing.families import HashFamily, SequentialHashFamily

__all__ = ["Coefficient", "HashFamily", "Operation", "SequentialHashFamily"]
