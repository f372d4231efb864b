"""
Result records produced by the list benchmark driver.

A :class:`ResultRecord` is one timed measurement: a single scenario run
against a single container variant.  Records are immutable; the driver
creates them right after a timed region and never touches them again.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import NS_PER_US


@dataclass(frozen=True)
class ResultRecord:
    """One (scenario, variant) timing sample.

    Attributes
    ----------
    operation : str
        Scenario name, e.g. ``"add(end)"``.
    variant : str
        Container label, ``"ArrayList"`` or ``"LinkedList"``.
    iterations : int
        Number of operations performed inside the timed region.
    elapsed_ns : int
        Wall-clock duration of the timed region in nanoseconds.
    """
    operation: str
    variant: str
    iterations: int
    elapsed_ns: int

    @property
    def elapsed_us(self) -> int:
        """Elapsed time in whole microseconds (truncated)."""
        return self.elapsed_ns // NS_PER_US
