"""Base exceptions for grepbat domain."""


class GrepBatError(Exception):
    """Failure that stops a grepbat run.

    Malformed result lines are never reported this way; the parser
    returns None for them instead.
    """
