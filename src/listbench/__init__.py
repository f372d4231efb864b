"""
listbench - ArrayList vs LinkedList performance comparison

Measures how a contiguous array (``list``) and a doubly-linked block list
(``collections.deque``) behave under the same sequence workloads:

    benchmarks  - Benchmark driver that times nine scenarios (append,
                  prepend, middle insert, random/sequential access, end,
                  front and middle removal, iteration) against both
                  containers and records one sample per pair.

    report      - Groups results by operation, builds the comparison table
                  and winner tally, and renders them as fixed-width text.

    plots       - Grouped bar chart of the comparison table.

The numbers make the memory-layout trade-off visible: contiguous storage
wins whenever the access pattern lets the CPU cache and prefetcher help,
linked storage wins only where it avoids shifting elements.
"""

from .benchmarks import ListBenchmark
from .results import ResultRecord

__all__ = ["ListBenchmark", "ResultRecord"]
