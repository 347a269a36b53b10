"""
Check a sum of multiples solver against a known correct answer.

A solver is any callable taking (factors, upper_bound) and returning the sum of
every number below upper_bound that at least one factor divides. The tester
feeds it random arguments and records what it returned next to what it should
have returned.

Args:
    solver: callable(factors, upper_bound) -> int
    test_count: how many random cases to run. defaults to TEST_COUNT
    rng: random.Random to draw arguments from
Returns:
    results: list of TestData, one per case
Raises:
    ValueError: if test_count is negative
Usage:
    results = random_tests(sum_of_multiples_fast, 100)
    print(to_json(results))
"""
from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from sum_of_multiples import sum_of_multiples

log = logging.getLogger(__name__)

# number of cases to run when the caller doesn't say
TEST_COUNT = 10

# sampler ranges, upper ends are excluded
FACTOR_COUNT_MIN = 1
FACTOR_COUNT_MAX = 8
FACTOR_MIN = 2
FACTOR_MAX = 256
UPPER_BOUND_MIN = 8
UPPER_BOUND_MAX = 65536

Solver = Callable[[Sequence[int], int], int]


@dataclass(frozen=True)
class SolverArguments:
    factors: Tuple[int, ...]
    upper_bound: int


@dataclass(frozen=True)
class TestData:
    arguments: SolverArguments
    solution: int
    proposal: int
    success: bool


# keep pytest from collecting the record type as a test class
TestData.__test__ = False


def correct(factors: Sequence[int], upper_bound: int) -> int:
    """The answer every solver is compared against"""
    return sum_of_multiples(factors, upper_bound)


def random_arguments(rng: random.Random) -> SolverArguments:
    """Draws a factor list (repeats allowed) and an upper bound"""
    factor_count = rng.randrange(FACTOR_COUNT_MIN, FACTOR_COUNT_MAX)
    factors = tuple(rng.randrange(FACTOR_MIN, FACTOR_MAX) for _ in range(factor_count))
    upper_bound = rng.randrange(UPPER_BOUND_MIN, UPPER_BOUND_MAX)
    return SolverArguments(factors, upper_bound)


def test(solver: Solver, arguments: SolverArguments) -> TestData:
    """Runs solver once and compares it to the correct answer"""
    solution = solver(list(arguments.factors), arguments.upper_bound)
    proposal = correct(arguments.factors, arguments.upper_bound)
    if solution != proposal:
        log.debug("solver gave %s, expected %s for %s", solution, proposal, arguments)
    return TestData(arguments, solution, proposal, solution == proposal)


# not a pytest test, it takes a solver
test.__test__ = False


def random_tests(
    solver: Solver, test_count: int = TEST_COUNT, rng: Optional[random.Random] = None
) -> List[TestData]:
    """Runs solver against test_count random argument sets"""
    if test_count < 0:
        raise ValueError(f"test_count must be >= 0, got {test_count}")
    if rng is None:
        rng = random.Random()

    results = [test(solver, random_arguments(rng)) for _ in range(test_count)]
    log.debug(
        "%d of %d random tests passed",
        sum(1 for result in results if result.success),
        test_count,
    )
    return results


def to_json(results: Sequence[TestData]) -> str:
    """Dumps results in the same shape as the dataclasses"""
    return json.dumps([asdict(result) for result in results], indent=2)
