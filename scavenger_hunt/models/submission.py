"""
Submission payload and outcome models.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .item import HuntItem


SUCCESS_MESSAGE = "Submission successful!"
INCOMPLETE_MESSAGE = "You must find all items before submitting."
IN_PROGRESS_MESSAGE = "A submission is already in progress."


class SubmittedItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    photo_base64: str = Field("", alias="photoBase64")


class SubmissionPayload(BaseModel):
    """JSON body posted when a completed hunt is submitted."""
    model_config = ConfigDict(populate_by_name=True)

    found_count: int = Field(..., ge=0, alias="foundCount")
    items: List[SubmittedItem] = Field(default_factory=list)

    @classmethod
    def from_items(cls, items: List[HuntItem]) -> 'SubmissionPayload':
        """Build the payload for every item, found or not."""
        return cls(
            found_count=sum(1 for item in items if item.found),
            items=[
                SubmittedItem(title=item.title, photo_base64=item.photo_base64())
                for item in items
            ]
        )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class TransportResult(BaseModel):
    """Outcome of a single HTTP exchange.

    ``ok`` is False only when no response was received at all.
    """
    ok: bool
    status_code: Optional[int] = None
    reason: str = ""
    error: Optional[str] = None

    def is_success_status(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


class SubmissionResult(BaseModel):
    """User-facing result of a submit attempt."""
    success: bool
    message: str
    network_attempted: bool = False
    status_code: Optional[int] = None
