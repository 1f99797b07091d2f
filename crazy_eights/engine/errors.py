class InvalidSelection(ValueError):
    """The human picked a card or suit that does not exist"""


class IllegalPlay(InvalidSelection):
    """The selected card exists but cannot be played on the current up card"""


class PreconditionViolation(RuntimeError):
    """The engine was driven in a way its callers must never do"""
