#!/usr/bin/env python3
"""
Exceptions raised by the physics core when running in strict mode.
"""


class DegenerateConfigurationError(ArithmeticError):
    """
    A body configuration for which the equations are undefined.

    Examples: two bodies at the same position, normalizing a zero vector,
    a body with zero mass, or an elliptic orbit with periapsis above apoapsis.
    """
