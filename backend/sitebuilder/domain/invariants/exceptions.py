class InvariantViolation(Exception):
    """Raised inside a transaction when a domain invariant does not hold."""
