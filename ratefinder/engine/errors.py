"""Typed errors raised by the engine.

Only malformed input shape is an error. Numeric trouble (zero derivative,
rates at or below -100%, no root near the guess) is reported through the
result's ``converged`` flag instead.
"""


class InvalidInputError(ValueError):
    """Cash-flow input cannot form a series (empty, mismatched lengths, bad values)."""
