"""
Exceptions raised by the search engine.
"""


class PreconditionViolation(RuntimeError):
    """
    Raised when an operation is called in a state where it is not defined.

    Examples are searching a game that is already over, or asking for the
    winner of a position that still has legal moves. These are caller errors
    and are not meant to be recovered from locally.
    """
