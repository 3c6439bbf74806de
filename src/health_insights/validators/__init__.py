"""
Validators for extracted metric values.
"""

from .plausibility import PlausibilityChecker, check_plausibility, get_plausibility_range

__all__ = [
    "PlausibilityChecker",
    "check_plausibility",
    "get_plausibility_range",
]
