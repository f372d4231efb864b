"""
benchmarks.py - List Container Benchmark Driver

Times the same nine sequence operations against two container layouts and
records one sample per (scenario, variant) pair:

    ArrayList  - built-in ``list``: a contiguous, over-allocated array of
                 object pointers.
    LinkedList - ``collections.deque``: a doubly-linked list of fixed-size
                 blocks.

Scenarios, in execution order:

    1. add(end)          - append N values to an empty container
    2. add(begin)        - insert N values at index 0
    3. add(middle)       - insert N/10 values at the midpoint of N/10 values
    4. get(random)       - N reads at seeded pseudorandom indices
    5. get(sequential)   - N reads at indices 0..N-1
    6. remove(end)       - delete the last element until empty
    7. remove(begin)     - delete the first element until empty
    8. remove(middle)    - delete the midpoint until one element remains
    9. iteration         - one forward traversal summing every value

Hardware context
----------------
A ``list`` keeps its element pointers in one contiguous buffer, so indexing
is a single offset computation and a forward sweep streams through cache
lines the prefetcher can predict.  Inserting or deleting anywhere but the
tail must ``memmove`` every trailing pointer.

A ``deque`` stores 64 pointers per block and links blocks in both
directions.  Both ends are O(1), but ``d[i]`` must walk block by block from
the nearer end, so indexed access toward the middle is O(n).

The middle insert/remove scenarios are quadratic for both containers and
are run on N/10 elements so they do not dominate total run time.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Callable, Dict, List, MutableSequence, Tuple

import numpy as np

from .constants import (
    ARRAY_LIST,
    DEFAULT_TEST_ITERATIONS,
    DEFAULT_WARMUP_ITERATIONS,
    LINKED_LIST,
    MIDDLE_SCALE_DIVISOR,
    MIN_TEST_ITERATIONS,
    OP_ADD_BEGIN,
    OP_ADD_END,
    OP_ADD_MIDDLE,
    OP_GET_RANDOM,
    OP_GET_SEQUENTIAL,
    OP_ITERATION,
    OP_REMOVE_BEGIN,
    OP_REMOVE_END,
    OP_REMOVE_MIDDLE,
    RANDOM_SEED,
)
from .results import ResultRecord

logger = logging.getLogger(__name__)

SequenceFactory = Callable[..., MutableSequence]

# Measurement order within every scenario: ArrayList first, then LinkedList
VARIANT_FACTORIES: Dict[str, SequenceFactory] = {
    ARRAY_LIST: list,
    LINKED_LIST: deque,
}


def _filled(factory: SequenceFactory, size: int) -> MutableSequence:
    """Return a new container holding ``0 .. size-1``."""
    return factory(range(size))


def _random_indices(size: int, count: int, seed: int = RANDOM_SEED) -> List[int]:
    """Reproducible index sequence in ``[0, size)`` as plain Python ints."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, size, size=count).tolist()


# ---------------------------------------------------------------------------
# Benchmark driver
# ---------------------------------------------------------------------------

class ListBenchmark:
    """
    Runs every list scenario against both container variants.

    Each scenario is written once against the sequence protocol shared by
    ``list`` and ``deque`` (``append``, ``insert``, ``__getitem__``,
    ``__delitem__``, iteration) and is invoked once per variant.  The timed
    region is bracketed by :func:`time.perf_counter_ns`; results accumulate
    in insertion order and are exposed as an immutable snapshot.

    Parameters
    ----------
    warmup_iterations : int
        Operations run against both variants before any measurement.
        Must be >= 0.
    test_iterations : int
        Nominal scenario size N.  Must be >= 10 so the N/10 scenarios
        still operate on at least one element.

    Raises
    ------
    ValueError
        If either count is not an integer or is out of range.
    """

    def __init__(
        self,
        warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
        test_iterations: int = DEFAULT_TEST_ITERATIONS,
    ) -> None:
        self._warmup_iterations = self._validate_count(
            "warmup_iterations", warmup_iterations, 0
        )
        self._test_iterations = self._validate_count(
            "test_iterations", test_iterations, MIN_TEST_ITERATIONS
        )
        self._results: List[ResultRecord] = []

    @staticmethod
    def _validate_count(name: str, value: int, minimum: int) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{name} must be an integer, got {value!r}.")
        if value < minimum:
            raise ValueError(f"{name} must be >= {minimum}, got {value}.")
        return int(value)

    @property
    def warmup_iterations(self) -> int:
        return self._warmup_iterations

    @property
    def test_iterations(self) -> int:
        return self._test_iterations

    # ---- Orchestration ---------------------------------------------------

    def run_all_tests(self) -> None:
        """Warm up, then run all nine scenarios in their fixed order."""
        logger.info("Starting performance tests...")
        logger.info("Warmup iterations: %d", self._warmup_iterations)
        logger.info("Test iterations: %d", self._test_iterations)

        self._warm_up()

        scenarios: Dict[str, Callable[[SequenceFactory], Tuple[int, int]]] = {
            OP_ADD_END: self._add_to_end,
            OP_ADD_BEGIN: self._add_to_beginning,
            OP_ADD_MIDDLE: self._add_to_middle,
            OP_GET_RANDOM: self._get_random,
            OP_GET_SEQUENTIAL: self._get_sequential,
            OP_REMOVE_END: self._remove_from_end,
            OP_REMOVE_BEGIN: self._remove_from_beginning,
            OP_REMOVE_MIDDLE: self._remove_from_middle,
            OP_ITERATION: self._iterate,
        }

        for operation, scenario in scenarios.items():
            logger.info("Testing %s...", operation)
            for variant, factory in VARIANT_FACTORIES.items():
                iterations, elapsed_ns = scenario(factory)
                self._results.append(
                    ResultRecord(operation, variant, iterations, elapsed_ns)
                )

        logger.info("All tests completed!")

    def _warm_up(self) -> None:
        logger.info("Warming up...")
        containers = [factory() for factory in VARIANT_FACTORIES.values()]
        for i in range(self._warmup_iterations):
            for seq in containers:
                seq.append(i)
                seq[i % len(seq)]
        for seq in containers:
            seq.clear()

    # ---- Scenarios -------------------------------------------------------
    #
    # Each returns (iterations, elapsed_ns) for one variant.  Container
    # construction is inside the timed region only for the add scenarios.

    def _add_to_end(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        start = time.perf_counter_ns()
        seq = factory()
        for i in range(n):
            seq.append(i)
        return n, time.perf_counter_ns() - start

    def _add_to_beginning(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        start = time.perf_counter_ns()
        seq = factory()
        for i in range(n):
            seq.insert(0, i)
        return n, time.perf_counter_ns() - start

    def _add_to_middle(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations // MIDDLE_SCALE_DIVISOR
        base = _filled(factory, n)

        start = time.perf_counter_ns()
        seq = factory(base)
        for i in range(n):
            seq.insert(len(seq) // 2, i)
        return n, time.perf_counter_ns() - start

    def _get_random(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        seq = _filled(factory, n)
        # Fresh generator per variant: both replay the same index sequence
        indices = _random_indices(len(seq), n)

        start = time.perf_counter_ns()
        for index in indices:
            seq[index]
        return n, time.perf_counter_ns() - start

    def _get_sequential(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        seq = _filled(factory, n)

        start = time.perf_counter_ns()
        for i in range(n):
            seq[i]
        return n, time.perf_counter_ns() - start

    def _remove_from_end(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        seq = _filled(factory, n)

        start = time.perf_counter_ns()
        while seq:
            del seq[len(seq) - 1]
        return n, time.perf_counter_ns() - start

    def _remove_from_beginning(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        seq = _filled(factory, n)

        start = time.perf_counter_ns()
        while seq:
            del seq[0]
        return n, time.perf_counter_ns() - start

    def _remove_from_middle(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations // MIDDLE_SCALE_DIVISOR
        seq = _filled(factory, n)

        start = time.perf_counter_ns()
        while len(seq) > 1:
            del seq[len(seq) // 2]
        return n, time.perf_counter_ns() - start

    def _iterate(self, factory: SequenceFactory) -> Tuple[int, int]:
        n = self._test_iterations
        seq = _filled(factory, n)

        start = time.perf_counter_ns()
        total = 0
        for value in seq:
            total += value
        return n, time.perf_counter_ns() - start

    # ---- Results ---------------------------------------------------------

    def get_results(self) -> Tuple[ResultRecord, ...]:
        """Snapshot of all records so far, in measurement order."""
        return tuple(self._results)

    def clear_results(self) -> None:
        """Drop all recorded results so the driver can be run again."""
        self._results.clear()
