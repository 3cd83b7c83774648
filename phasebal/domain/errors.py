# phasebal/domain/errors.py
"""Exceptions raised by the balancing engine."""


class InvalidConfiguration(ValueError):
    """A circuit was described with an impossible phase count or load."""


class UnassignableCircuit(RuntimeError):
    """An invalid circuit reached the phase assigner (broken upstream invariant)."""
