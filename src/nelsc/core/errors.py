class NelscError(Exception):
    """Base error."""

class ContractViolation(NelscError, ValueError):
    """Raised when a value outside an operation's documented domain is passed in."""
