"""
Add up every number below a limit that is a multiple of at least one of the
given factors. Each number is added once, however many factors it has.

With factors 3 and 5 and a limit of 20 the multiples are
3, 5, 6, 9, 10, 12, 15, and 18, which add up to 78.

Args:
    factors: sequence of positive integers. may be empty, may repeat
    upper_bound: exclusive limit, integer >= 0
Returns:
    total: sum of every number below upper_bound divisible by at least one factor
Raises:
    InvalidFactor: if any factor is zero or negative
    InvalidBound: if upper_bound is negative
    TypeError: if a factor or upper_bound is not an int
Example:
    sum_of_multiples([3, 5], 10)  ->  23   (3 + 5 + 6 + 9)

Results are plain python ints, so there is no overflow and no maximum bound.
sum_of_multiples scans every number below the bound, so it is linear in the
bound. sum_of_multiples_fast uses inclusion-exclusion over the lcm of subsets
of factors. Its cost grows with the number of factors instead: up to 2^n
subsets for n factors, less once factors that are multiples of another factor
are dropped and subsets whose lcm reaches the bound are cut off.
"""
import logging
from math import gcd
from typing import List, Sequence

log = logging.getLogger(__name__)


class InvalidFactor(ValueError):
    """A factor that is zero or negative"""


class InvalidBound(ValueError):
    """An upper bound below zero"""


def validate(factors: Sequence[int], upper_bound: int) -> None:
    """Raises before any summing if the input can't be used"""
    for factor in factors:
        if not isinstance(factor, int):
            raise TypeError(f"factors must be integers, got {factor!r}")
        if factor <= 0:
            raise InvalidFactor(f"factors must be positive, got {factor}")
    if not isinstance(upper_bound, int):
        raise TypeError(f"upper bound must be an integer, got {upper_bound!r}")
    if upper_bound < 0:
        raise InvalidBound(f"upper bound must be >= 0, got {upper_bound}")


def sum_of_multiples(factors: Sequence[int], upper_bound: int) -> int:
    """Adds up each number below upper_bound that any factor divides"""
    validate(factors, upper_bound)
    log.debug("scanning %d factors below %d", len(factors), upper_bound)

    total = 0
    for multiple in range(1, upper_bound):
        for factor in factors:
            if multiple % factor == 0:
                total += multiple
                # counted once, no matter how many factors match
                break
    return total


def least_common_multiple(numbers: Sequence[int]) -> int:
    """Returns the smallest number every one of numbers divides. 1 if empty."""
    lcm = 1
    for number in numbers:
        lcm = lcm * number // gcd(lcm, number)
    return lcm


def essential_factors(factors: Sequence[int], upper_bound: int) -> List[int]:
    """
    Drops factors that can't change the result: duplicates, factors at or
    above the bound, and multiples of another factor.
    """
    essential: List[int] = []
    for factor in sorted(set(factors)):
        if factor >= upper_bound:
            break
        if all(factor % smaller for smaller in essential):
            essential.append(factor)
    return essential


def sum_of_multiples_fast(factors: Sequence[int], upper_bound: int) -> int:
    """
    Same result as sum_of_multiples, using inclusion-exclusion.

    Every multiple of lcm below the bound is lcm * (1 + 2 + ... + k) where
    k = (upper_bound - 1) // lcm. Subsets with an odd number of factors add,
    even ones subtract, which cancels the overlaps. Subsets are built one
    factor at a time; once the running lcm reaches the bound, that subset and
    every larger one built from it add nothing and are skipped.
    """
    validate(factors, upper_bound)
    essential = essential_factors(factors, upper_bound)
    log.debug("inclusion-exclusion over %d factors below %d", len(essential), upper_bound)

    total = 0
    # (next index to try, lcm so far, sign of the next subset)
    stack = [(0, 1, 1)]
    while stack:
        start, lcm_so_far, sign = stack.pop()
        for index in range(start, len(essential)):
            factor = essential[index]
            lcm = lcm_so_far * factor // gcd(lcm_so_far, factor)
            if lcm >= upper_bound:
                continue
            count = (upper_bound - 1) // lcm
            total += sign * lcm * count * (count + 1) // 2
            stack.append((index + 1, lcm, -sign))
    return total
