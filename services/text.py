from core.errors import ValidationError


def required_text(value: str | None, message: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def optional_text(value: str | None) -> str:
    return (value or "").strip()
