# runway/schemas/validators.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


def reject_explicit_nulls(model: BaseModel, *fields: str) -> BaseModel:
    """
    Partial updates leave unsent fields alone, but a field sent as ``null``
    would be written as NULL. Refuse that for columns that cannot hold it.
    """
    nulls = [f for f in fields if f in model.model_fields_set and getattr(model, f) is None]
    if nulls:
        raise ValueError(f"{', '.join(nulls)} cannot be null")
    return model


def to_local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive server-local time; offsets are converted, not dropped."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value
