from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """Convert any value to Decimal

    Meant to be called from pydantic ``field_validator(mode="before")`` and
    from factories. Decimals pass through unchanged, everything else goes
    through ``str`` so floats keep their printed value.
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))
