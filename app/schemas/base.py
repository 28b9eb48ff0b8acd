from datetime import datetime, timezone

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Stamps are stored in UTC; some stores hand them back without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase JSON keys and accepts either form."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
