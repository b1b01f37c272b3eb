"""Collected validation messages keyed by field name."""

from __future__ import annotations


class ValidationErrors(dict):
    """Mapping of field name to the list of its error messages."""

    def add(self, field: str, message: str) -> None:
        """Append ``message`` to the messages of ``field``."""
        self.setdefault(field, []).append(message)

    def has_errors(self) -> bool:
        """Return True when any field has a message."""
        return bool(self)