"""Human-readable labels for field names."""


def field_label(field: str) -> str:
    """Turn a field name such as ``nama_lengkap`` into ``Nama lengkap``."""
    text = field.replace("_", " ")
    if not text:
        return text
    return text[0].upper() + text[1:]