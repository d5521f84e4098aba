"""Exceptions raised by the toroid optimization."""


class ToroidError(Exception):
    """Base class of all toroid optimization errors."""


class InvalidArgumentError(ToroidError, ValueError):
    """Input parameter is outside of its valid range."""


class GeometryInfeasibleError(ToroidError, ArithmeticError):
    """Requested winding can not be realized with the computed geometry."""


class RootFindFailureError(ToroidError, RuntimeError):
    """Solver for the dimensionless winding parameter did not converge."""
