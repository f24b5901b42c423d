"""Base schema class for persisted records."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]
"""Datetime that is always timezone-aware; naive input (e.g. a hand-edited
store file) is read as UTC."""


class SchemaBase(BaseModel):
    """Base class for records stored in ``store.json``.

    Fields are snake_case in Python and camelCase on disk; either spelling
    is accepted when loading.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict using on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)
