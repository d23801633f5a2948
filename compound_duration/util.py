"""Unit constants for compound_duration.

Second-based constants are counts of seconds, the rest are counts of
nanoseconds. Both ladders in `compound_duration.ladder` are built from them.
"""

# Nanosecond units (all values in nanoseconds)
NS = 1
US = 1_000
MS = 1_000_000
NANOS = 1_000_000_000

# Second units (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3_600
DAY = 86_400
WEEK = 604_800

# Inputs are narrowed to this width before decomposition
U64_MAX = 2**64 - 1
