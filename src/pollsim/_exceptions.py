class PollsimError(Exception):
    """Base class for all pollsim errors."""


class ConfigurationError(PollsimError, ValueError):
    """Inputs that cannot describe a valid simulation; raised before any trial runs."""


class InvariantViolation(PollsimError, RuntimeError):
    """Internal bookkeeping went wrong (double assignment, no free station)."""
