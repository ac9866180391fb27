class SimplexError(Exception):
    """Base class for solver errors"""


class PivotError(SimplexError):
    """Pivot element too close to zero"""


class PhaseError(SimplexError):
    """Phase transition requested from a state that does not allow it"""
