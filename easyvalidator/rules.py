"""Validation rules and the parser for rule specifications such as ``min:5``."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from .naming import field_label

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_LETTERS = re.compile(r"[a-zA-Z]*")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")


class RuleError(ValueError):
    """Raised when a rule specification or its parameters are invalid."""


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def _parse_length(params: list[str], rule_name: str, missing_message: str) -> int:
    if not params:
        raise RuleError(missing_message)
    text = params[0]
    if not _INTEGER.fullmatch(text):
        raise RuleError(f"parameter {rule_name} harus berupa angka: {text!r}")
    return int(text)


class Rule(ABC):
    """A single check applied to one field value."""

    name: ClassVar[str] = ""

    def parse_params(self, params: list[str]) -> None:
        """Configure the rule from its parameters; rules without parameters ignore them."""

    @abstractmethod
    def validate(self, field: str, value: Any) -> str | None:
        """Return an error message for ``value``, or None when it passes."""


class RequiredRule(Rule):
    """The value must be present and not empty."""

    name = "required"

    def validate(self, field: str, value: Any) -> str | None:
        message = f"{field_label(field)} tidak boleh kosong."
        if value is None:
            return message
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            return message if not value.strip() else None
        if isinstance(value, (int, float)) and value == 0:
            return message
        return None


class EmailRule(Rule):
    """The value must be a string shaped like an e-mail address."""

    name = "email"

    def validate(self, field: str, value: Any) -> str | None:
        label = field_label(field)
        if not isinstance(value, str):
            return f"{label} harus berupa string untuk validasi email."
        if not _EMAIL.fullmatch(value):
            return f"Format {label} tidak valid."
        return None


@dataclass
class MinRule(Rule):
    """The string value must be at least ``min_length`` bytes long."""

    min_length: int = 0
    name: ClassVar[str] = "min"

    def parse_params(self, params: list[str]) -> None:
        self.min_length = _parse_length(
            params, "min", "aturan min membutuhkan parameter panjang minimum"
        )

    def validate(self, field: str, value: Any) -> str | None:
        label = field_label(field)
        if not isinstance(value, str):
            return f"{label} harus berupa string untuk validasi panjang."
        if _byte_length(value) < self.min_length:
            return f"{label} harus memiliki minimal {self.min_length} karakter."
        return None


@dataclass
class MaxRule(Rule):
    """The string value must be at most ``max_length`` bytes long."""

    max_length: int = 0
    name: ClassVar[str] = "max"

    def parse_params(self, params: list[str]) -> None:
        self.max_length = _parse_length(
            params,
            "max",
            "Contoh penggunaan: max:50, aturan min membutuhkan parameter panjang karakter",
        )

    def validate(self, field: str, value: Any) -> str | None:
        label = field_label(field)
        if not isinstance(value, str):
            return f"{label} harus berupa string untuk validasi panjang."
        if _byte_length(value) > self.max_length:
            return f"Karakter {label} terlalu panjang,Maksimal {self.max_length}."
        return None


class PasswordRule(Rule):
    """At least 8 bytes with an upper-case letter, a lower-case letter and a digit."""

    name = "password"

    def validate(self, field: str, value: Any) -> str | None:
        if not isinstance(value, str):
            return f"{field_label(field)} harus berupa string untuk validasi kata sandi."
        if _byte_length(value) < 8:
            return "Kata sandi harus memiliki minimal 8 karakter."
        if not (_UPPER.search(value) and _LOWER.search(value) and _DIGIT.search(value)):
            return (
                "Kata sandi harus mengandung setidaknya satu huruf besar, "
                "satu huruf kecil, dan satu angka."
            )
        return None


class OnlyLettersRule(Rule):
    """The string value may hold ASCII letters only."""

    name = "only_letters"

    def validate(self, field: str, value: Any) -> str | None:
        label = field_label(field)
        if not isinstance(value, str):
            return f"{label} hanya boleh berupa string untuk validasi huruf."
        if value and not _LETTERS.fullmatch(value):
            return f"{label} hanya boleh huruf"
        return None


RULES: dict[str, type[Rule]] = {
    "required": RequiredRule,
    "email": EmailRule,
    "min": MinRule,
    "max": MaxRule,
    "password": PasswordRule,
    "only_letters": OnlyLettersRule,
}


def rule_from_spec(spec: str) -> Rule:
    """Build a configured rule from a specification like ``"min:5"``."""
    name, separator, rest = spec.partition(":")
    params = rest.split(",") if separator else []
    try:
        rule_class = RULES[name]
    except KeyError:
        raise RuleError(f"aturan '{name}' tidak ditemukan") from None
    rule = rule_class()
    try:
        rule.parse_params(params)
    except RuleError as exc:
        raise RuleError(
            f"kesalahan parsing parameter untuk aturan '{name}': {exc}"
        ) from exc
    return rule