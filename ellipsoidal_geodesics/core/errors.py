"""Error types for geodesic computations.

Only construction problems are errors. Unusual geometry (coincident,
antipodal or pole points) is resolved by convention and never raises.
"""


class InvalidParameterError(ValueError):
    """Raised when an ellipsoid or solver configuration is invalid."""


class FixtureFormatError(ValueError):
    """Raised when a regression fixture byte stream is malformed."""
