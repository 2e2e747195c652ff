class InvariantViolation(Exception):
    """A persisted content record broke one of its structural rules."""
