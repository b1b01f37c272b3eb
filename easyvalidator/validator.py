"""Apply rule strings such as ``"required|min:5"`` to a mapping of values."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .errors import ValidationErrors
from .rules import RuleError, rule_from_spec


@dataclass
class Validator:
    """Checks ``data`` against ``rules`` (field name to ``"rule1|rule2:param"``)."""

    data: dict[str, Any]
    rules: dict[str, str]
    errors: ValidationErrors = field(default_factory=ValidationErrors)

    def validate(self) -> ValidationErrors:
        """Run every rule and return the collected errors.

        Fields absent from the data are only checked by ``required``; checking a
        field stops at its first failing rule.
        """
        for name, rule_string in self.rules.items():
            exists = name in self.data
            value = self.data.get(name)
            for spec in rule_string.split("|"):
                try:
                    rule = rule_from_spec(spec)
                except RuleError as exc:
                    self.errors.add(name, f"Kesalahan internal: {exc}")
                    continue
                if not exists and rule.name != "required":
                    continue
                message = rule.validate(name, value)
                if message is not None:
                    self.errors.add(name, message)
                    break
        return self.errors


def simple_validate(data: dict[str, Any], rules: dict[str, str]) -> dict[str, str] | None:
    """Return each failing field's first message, or None when all pass."""
    errors = Validator(data, rules).validate()
    if not errors.has_errors():
        return None
    return {name: messages[0] for name, messages in errors.items()}


def first_error(data: dict[str, Any], rules: dict[str, str]) -> tuple[str, str] | None:
    """Return ``(field, message)`` for the first failing field, or None."""
    errors = Validator(data, rules).validate()
    for name, messages in errors.items():
        return name, messages[0]
    return None


def object_to_dict(obj: Any) -> dict[str, Any]:
    """Map a dataclass instance's fields, names lower-cased, to their values."""
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError("input harus berupa instance dataclass")
    return {f.name.lower(): getattr(obj, f.name) for f in dataclasses.fields(obj)}