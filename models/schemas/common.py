from marshmallow import ValidationError, validate


def not_blank(value):
    if value is not None and not value.strip():
        raise ValidationError("Must not be blank.")


def short_text(max_length):
    return [validate.Length(max=max_length), not_blank]
