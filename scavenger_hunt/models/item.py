"""
Hunt item and hunt state models.
"""
import base64
import binascii
import uuid
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


def new_item_id() -> str:
    return str(uuid.uuid4())


class HuntItem(BaseModel):
    """One scavenger hunt target.

    ``photo_data`` is present exactly when ``found`` is true. On the wire the
    photo travels as base64 text under the ``photoData`` key.
    Items are immutable; changes produce new copies.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_item_id)
    title: str
    clue: str
    found: bool = False
    photo_data: Optional[bytes] = Field(None, alias="photoData")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        """Ids are UUID strings."""
        try:
            return str(uuid.UUID(v))
        except (ValueError, AttributeError, TypeError):
            raise ValueError(f"Item id is not a UUID: {v!r}")

    @field_validator('photo_data', mode='before')
    @classmethod
    def decode_photo(cls, v):
        """Accept base64 text as stored in the persisted JSON."""
        if isinstance(v, str):
            try:
                return base64.b64decode(v, validate=True)
            except binascii.Error as e:
                raise ValueError(f"photoData is not valid base64: {e}")
        return v

    @model_validator(mode='after')
    def check_photo_matches_found(self):
        if self.found != (self.photo_data is not None):
            raise ValueError("Item must have a photo if and only if it is found")
        return self

    @field_serializer('photo_data', when_used='json')
    def serialize_photo(self, v: Optional[bytes]) -> Optional[str]:
        if v is None:
            return None
        return base64.b64encode(v).decode('ascii')

    def photo_base64(self) -> str:
        """Get the photo as base64 text, or an empty string when absent."""
        if self.photo_data is None:
            return ""
        return base64.b64encode(self.photo_data).decode('ascii')

    def with_photo(self, photo_data: bytes) -> 'HuntItem':
        """Return a found copy of this item carrying the given photo."""
        return self.model_copy(update={'found': True, 'photo_data': photo_data})

    def without_photo(self) -> 'HuntItem':
        """Return a not-found copy of this item with the photo discarded."""
        return self.model_copy(update={'found': False, 'photo_data': None})


class HuntState(BaseModel):
    """Snapshot of hunt progress handed to observers."""
    items: List[HuntItem] = Field(default_factory=list)
    is_submitting: bool = False
    last_submission_message: Optional[str] = None

    def found_count(self) -> int:
        return sum(1 for item in self.items if item.found)

    def total_count(self) -> int:
        return len(self.items)

    def is_complete(self) -> bool:
        """Check whether every item has been found."""
        return bool(self.items) and self.found_count() == self.total_count()
