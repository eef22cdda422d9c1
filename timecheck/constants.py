"""Application-wide constants for timecheck.

Thresholds live here so the settings layer and the checks share one default.
"""

# ============================================================================
# CLOCK SYNCHRONIZATION
# ============================================================================
MAX_EST_ERROR_US = 100_000  # 100 ms

# ============================================================================
# CHECK EXIT CODES (Nagios plugin convention)
# ============================================================================
EXIT_OK = 0
EXIT_FAILURE = 2
EXIT_UNKNOWN = 3
