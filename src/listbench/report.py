"""
report.py - Comparison tables and winner summary for list benchmarks

Everything here is a pure function of a result sequence.  The structured
views (:func:`group_by_operation`, :func:`comparison_table`,
:func:`operation_winners`, :func:`win_tally`) carry no formatting; the
``format_*`` functions turn them into fixed-width text and the ``print_*``
functions write that text to any file-like sink.
"""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Optional, TextIO, Tuple

import pandas as pd

from .constants import ARRAY_LIST, LINKED_LIST, RECOMMENDATIONS, VARIANT_LABELS
from .results import ResultRecord

TABLE_ROW = "%-20s | %-10s | %-12s | %-12s"
TABLE_RULE = "---------------------|------------|--------------|--------------"


# ---------------------------------------------------------------------------
# Structured views
# ---------------------------------------------------------------------------

def group_by_operation(
    results: Iterable[ResultRecord],
) -> Dict[str, List[ResultRecord]]:
    """Partition records by operation, keyed in first-seen order."""
    grouped: Dict[str, List[ResultRecord]] = {}
    for record in results:
        grouped.setdefault(record.operation, []).append(record)
    return grouped


def find_pair(
    records: Iterable[ResultRecord],
) -> Tuple[Optional[ResultRecord], Optional[ResultRecord]]:
    """Return the first ArrayList and first LinkedList record (or None)."""
    array_record = None
    linked_record = None
    for record in records:
        if record.variant == ARRAY_LIST and array_record is None:
            array_record = record
        elif record.variant == LINKED_LIST and linked_record is None:
            linked_record = record
    return array_record, linked_record


def _complete_pairs(results):
    for operation, records in group_by_operation(results).items():
        array_record, linked_record = find_pair(records)
        if array_record is not None and linked_record is not None:
            yield operation, array_record, linked_record


def comparison_table(results: Iterable[ResultRecord]) -> pd.DataFrame:
    """
    One row per operation with both variants present.

    Columns are ``iterations`` and one microsecond column per variant.
    Operations missing either variant are left out.
    """
    rows = [
        {
            "operation": operation,
            "iterations": array_record.iterations,
            ARRAY_LIST: array_record.elapsed_us,
            LINKED_LIST: linked_record.elapsed_us,
        }
        for operation, array_record, linked_record in _complete_pairs(results)
    ]
    columns = ["operation", "iterations", ARRAY_LIST, LINKED_LIST]
    return pd.DataFrame(rows, columns=columns).set_index("operation")


def operation_winners(results: Iterable[ResultRecord]) -> Dict[str, str]:
    """
    Faster variant per operation, compared on raw nanoseconds.

    ArrayList wins only when strictly faster; an exact tie goes to
    LinkedList.
    """
    return {
        operation: (
            ARRAY_LIST
            if array_record.elapsed_ns < linked_record.elapsed_ns
            else LINKED_LIST
        )
        for operation, array_record, linked_record in _complete_pairs(results)
    }


def win_tally(winners: Dict[str, str]) -> Dict[str, int]:
    """Count wins per variant; every variant appears, even with zero."""
    wins = {label: 0 for label in VARIANT_LABELS}
    for winner in winners.values():
        wins[winner] += 1
    return wins


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def format_results_table(results: Iterable[ResultRecord]) -> str:
    table = comparison_table(results)
    lines = [
        "",
        "PERFORMANCE RESULTS (in microseconds)",
        "==========================================",
        TABLE_ROW % ("Operation", "Iterations", ARRAY_LIST, LINKED_LIST),
        TABLE_RULE,
    ]
    for operation, row in table.iterrows():
        lines.append(
            TABLE_ROW % (
                operation,
                int(row["iterations"]),
                int(row[ARRAY_LIST]),
                int(row[LINKED_LIST]),
            )
        )
    return "\n".join(lines)


def format_summary(results: Iterable[ResultRecord]) -> str:
    winners = operation_winners(results)
    wins = win_tally(winners)

    lines = [
        "",
        "PERFORMANCE SUMMARY",
        "======================",
        "",
        "WINNER BY OPERATION:",
        "----------------------",
    ]
    lines += ["• %-18s: %s" % (operation, winner)
              for operation, winner in winners.items()]

    lines += ["", "FINAL SCORE:"]
    lines += [f"{label}: {count} wins" for label, count in wins.items()]

    lines += ["", "PRACTICAL RECOMMENDATIONS:"]
    lines += [f"• {text}" for text in RECOMMENDATIONS]
    return "\n".join(lines)


def print_results(results: Iterable[ResultRecord], out: Optional[TextIO] = None) -> None:
    """Write the comparison table to *out* (default: stdout)."""
    print(format_results_table(results), file=out or sys.stdout)


def print_summary(results: Iterable[ResultRecord], out: Optional[TextIO] = None) -> None:
    """Write the winner list, final score and recommendations to *out*."""
    print(format_summary(results), file=out or sys.stdout)
