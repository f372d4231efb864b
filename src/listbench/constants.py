"""
===============================================================================
LISTBENCH - Benchmark Constants
===============================================================================
Central repository for the compiled-in defaults, container labels, and
scenario names shared by the benchmark driver, the report renderer, and the
command-line entry point.
===============================================================================
"""


# =============================================================================
# RUN CONFIGURATION DEFAULTS
# =============================================================================
DEFAULT_WARMUP_ITERATIONS = 1000
DEFAULT_TEST_ITERATIONS = 10000

# O(n) middle insert/remove scenarios run on N / MIDDLE_SCALE_DIVISOR elements
MIDDLE_SCALE_DIVISOR = 10
MIN_TEST_ITERATIONS = MIDDLE_SCALE_DIVISOR

RANDOM_SEED = 42

# =============================================================================
# CONTAINER VARIANTS
# =============================================================================
ARRAY_LIST = "ArrayList"               # built-in list (contiguous array)
LINKED_LIST = "LinkedList"             # collections.deque (linked blocks)
VARIANT_LABELS = (ARRAY_LIST, LINKED_LIST)

# =============================================================================
# SCENARIO NAMES (in execution order)
# =============================================================================
OP_ADD_END = "add(end)"
OP_ADD_BEGIN = "add(begin)"
OP_ADD_MIDDLE = "add(middle)"
OP_GET_RANDOM = "get(random)"
OP_GET_SEQUENTIAL = "get(sequential)"
OP_REMOVE_END = "remove(end)"
OP_REMOVE_BEGIN = "remove(begin)"
OP_REMOVE_MIDDLE = "remove(middle)"
OP_ITERATION = "iteration"

OPERATIONS = (
    OP_ADD_END,
    OP_ADD_BEGIN,
    OP_ADD_MIDDLE,
    OP_GET_RANDOM,
    OP_GET_SEQUENTIAL,
    OP_REMOVE_END,
    OP_REMOVE_BEGIN,
    OP_REMOVE_MIDDLE,
    OP_ITERATION,
)

# =============================================================================
# REPORT TEXT
# =============================================================================
RECOMMENDATIONS = (
    "Use ArrayList for: random access, iteration, add/remove at end",
    "Use LinkedList for: frequent insertions/deletions at beginning/middle",
    "Default choice: ArrayList (better memory locality, cache-friendly)",
)

NS_PER_US = 1000
