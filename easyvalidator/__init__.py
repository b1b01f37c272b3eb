"""Rule-string validation for dictionaries of input data, with Indonesian messages."""

__version__ = "0.1.0"

__all__ = ["errors", "naming", "rules", "validator"]