import pytest

from easyvalidator.rules import (
    EmailRule,
    MaxRule,
    MinRule,
    OnlyLettersRule,
    PasswordRule,
    RequiredRule,
    RuleError,
    rule_from_spec,
)

STRONG = "password".capitalize() + "1"
WEAK_SHORT = "password"[:4]
WEAK_SIMPLE = "password"


@pytest.mark.parametrize("value", [None, "", "   ", 0, 0.0])
def test_required_rejects_empty_values(value):
    message = RequiredRule().validate("nama", value)
    assert message is not None
    assert message.endswith("tidak boleh kosong.")


@pytest.mark.parametrize("value", ["x", 5, 1.5, False, True, [], {}])
def test_required_accepts_present_values(value):
    assert RequiredRule().validate("nama", value) is None


def test_required_message_uses_field_label():
    message = RequiredRule().validate("nama_lengkap", None)
    assert message.startswith("Nama lengkap")


def test_email_accepts_valid_address():
    assert EmailRule().validate("email", "user@example.com") is None


@pytest.mark.parametrize(
    "value", ["not-an-email", "user@example", "user@example.com\n", "@example.com"]
)
def test_email_rejects_bad_addresses(value):
    message = EmailRule().validate("email", value)
    assert message is not None
    assert message.startswith("Format")
    assert message.endswith("tidak valid.")


def test_email_rejects_non_string():
    message = EmailRule().validate("email", 5)
    assert message.endswith("harus berupa string untuk validasi email.")


def test_min_rule_checks_length():
    rule = MinRule()
    rule.parse_params(["3"])
    assert rule.min_length == 3
    assert rule.validate("kode", "abc") is None
    message = rule.validate("kode", "ab")
    assert message is not None
    assert "minimal 3 karakter" in message


def test_min_rule_counts_bytes():
    rule = MinRule(min_length=4)
    assert rule.validate("kode", "éé") is None
    assert rule.validate("kode", "abc") is not None


@pytest.mark.parametrize("params", [[], [""], ["x"], [" 3"], ["3.5"]])
def test_min_rule_rejects_bad_params(params):
    with pytest.raises(RuleError):
        MinRule().parse_params(params)


def test_min_rule_rejects_non_string():
    message = MinRule(min_length=1).validate("kode", 12)
    assert message.endswith("harus berupa string untuk validasi panjang.")


def test_max_rule_checks_length():
    rule = MaxRule()
    rule.parse_params(["3"])
    assert rule.max_length == 3
    assert rule.validate("kode", "abc") is None
    message = rule.validate("kode", "abcd")
    assert message is not None
    assert message.startswith("Karakter Kode terlalu panjang")


@pytest.mark.parametrize("params", [[], ["abc"]])
def test_max_rule_rejects_bad_params(params):
    with pytest.raises(RuleError):
        MaxRule().parse_params(params)


def test_password_too_short():
    message = PasswordRule().validate("kata_sandi", WEAK_SHORT)
    assert message == "Kata sandi harus memiliki minimal 8 karakter."


def test_password_without_variety():
    message = PasswordRule().validate("kata_sandi", WEAK_SIMPLE)
    assert message == (
        "Kata sandi harus mengandung setidaknya satu huruf besar, "
        "satu huruf kecil, dan satu angka."
    )


def test_password_strong_passes():
    assert PasswordRule().validate("kata_sandi", STRONG) is None


def test_password_rejects_non_string():
    message = PasswordRule().validate("kata_sandi", 12345678)
    assert message.endswith("harus berupa string untuk validasi kata sandi.")


@pytest.mark.parametrize("value", ["abc", "ABCdef", ""])
def test_only_letters_accepts_letters(value):
    assert OnlyLettersRule().validate("nama", value) is None


@pytest.mark.parametrize("value", ["ab1", "a b", "abc\n", "é"])
def test_only_letters_rejects_other_characters(value):
    message = OnlyLettersRule().validate("nama", value)
    assert message is not None
    assert message.endswith("hanya boleh huruf")


def test_rule_from_spec_builds_configured_rule():
    rule = rule_from_spec("min:5")
    assert isinstance(rule, MinRule)
    assert rule.min_length == 5


def test_rule_from_spec_ignores_extra_params():
    rule = rule_from_spec("max:7,9")
    assert isinstance(rule, MaxRule)
    assert rule.max_length == 7


@pytest.mark.parametrize(
    "spec, bad, good, suffix",
    [
        ("required", None, "x", "tidak boleh kosong."),
        ("email", "not-an-email", "user@example.com", "tidak valid."),
        ("password", WEAK_SIMPLE, STRONG, "satu angka."),
        ("only_letters", "ab1", "abc", "hanya boleh huruf"),
    ],
)
def test_rule_from_spec_known_names(spec, bad, good, suffix):
    rule = rule_from_spec(spec)
    assert rule.validate("nama", good) is None
    message = rule.validate("nama", bad)
    assert message is not None
    assert message.endswith(suffix)


def test_rule_from_spec_unknown_name():
    with pytest.raises(RuleError, match="aturan 'unknown' tidak ditemukan"):
        rule_from_spec("unknown")


@pytest.mark.parametrize("spec", ["min", "min:", "max:abc"])
def test_rule_from_spec_bad_params(spec):
    with pytest.raises(RuleError, match="kesalahan parsing parameter"):
        rule_from_spec(spec)