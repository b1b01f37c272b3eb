# easyvalidator

Validate a dictionary of input values against short rule strings such as
`"required|min:3"`. Error messages are in Indonesian. Field names in them are
made readable by `easyvalidator.naming.field_label`: underscores become spaces
and the first letter is capitalised. For example, `nama_lengkap` is shown as
`Nama lengkap`.

## Installation

```
pip install easyvalidator
```

The package has no runtime dependencies.

## Rules

Each field has one rule string. Rules are separated by `|`. A rule's
parameters come after `:` and are separated by `,`.

| Rule           | Class             | Meaning |
|----------------|-------------------|---------|
| `required`     | `RequiredRule`    | The value must be present and not `None`. Blank strings, `0` and `0.0` count as empty; booleans (even `False`) and other values pass. |
| `email`        | `EmailRule`       | The value must be a string shaped like an e-mail address. |
| `min:N`        | `MinRule`         | The value must be a string of at least `N` bytes when encoded as UTF-8. |
| `max:N`        | `MaxRule`         | The value must be a string of at most `N` bytes when encoded as UTF-8. |
| `password`     | `PasswordRule`    | A string of at least 8 bytes with an upper-case letter, a lower-case letter and a digit. |
| `only_letters` | `OnlyLettersRule` | Only ASCII letters are allowed. An empty string passes. |

All rule classes live in `easyvalidator.rules`. The mapping of rule names to
classes is `easyvalidator.rules.RULES`.

Rules other than `required` are skipped when the field is missing from the
data. For each field, checking stops at the first rule that fails. An
unknown rule name or a bad parameter, such as `min:abc` or a bare `min`, is
recorded as an error on that field whose message starts with
`Kesalahan internal:`; checking then goes on with the field's next rule.

## Usage

### All errors per field

`Validator` is a dataclass holding `data`, `rules` and the collected
`errors`. `validate()` returns a `ValidationErrors`, a `dict` of field name
to list of messages, with `add(field, message)` and `has_errors()`.

```python
from easyvalidator.validator import Validator

data = {"username": "", "email": "not-an-email"}
rules = {"username": "required|min:3", "email": "required|email"}

errors = Validator(data, rules).validate()
if errors.has_errors():
    for field, messages in errors.items():
        print(field, messages)
# username ['Username tidak boleh kosong.']
# email ['Format Email tidak valid.']
```

### One message per field

```python
from easyvalidator.validator import simple_validate

simple_validate(
    {"username": "ab", "email": "someone@example.com"},
    {"username": "required|min:3", "email": "required|email"},
)
# {'username': 'Username harus memiliki minimal 3 karakter.'}
```

`simple_validate` returns `None` when every rule passes.

### Only the first error

```python
from easyvalidator.validator import first_error

first_error({"nama_lengkap": ""}, {"nama_lengkap": "required"})
# ('nama_lengkap', 'Nama lengkap tidak boleh kosong.')
```

`first_error` returns `None` when nothing fails.

### Validating a dataclass

`object_to_dict` turns a dataclass instance's fields into a dictionary with
lower-cased names. Anything that is not a dataclass instance raises
`TypeError`. The result can be passed to any of the functions above.

```python
from dataclasses import dataclass
from easyvalidator.validator import object_to_dict, simple_validate

@dataclass
class SignUp:
    Email: str

simple_validate(object_to_dict(SignUp(Email="someone@example.com")), {"email": "email"})
# None
```

### Single rules

A rule can also be built and used on its own. `rule_from_spec` raises
`RuleError` (a `ValueError`) for an unknown rule or a bad parameter. A rule's
`validate(field, value)` returns the error message, or `None` when the value
passes.

```python
from easyvalidator.rules import rule_from_spec

rule = rule_from_spec("max:5")
rule.validate("kode", "abcdefg")
# 'Karakter Kode terlalu panjang,Maksimal 5.'
rule.validate("kode", "abc")
# None
```

## What it does not do

easyvalidator is a library only: it has no command-line tool. Rules cannot be
registered from outside beyond the six listed above, and `object_to_dict`
reads dataclasses only, not arbitrary objects.