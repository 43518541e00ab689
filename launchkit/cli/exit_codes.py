"""Deterministic process exit-code mapping for the launcher.

External scripts branch on these values, so they must never change.
"""

SUCCESS = 0
BAD_ARGV = 2
LOCAL_ENVIRONMENTAL_ERROR = 36
INTERNAL_ERROR = 37
