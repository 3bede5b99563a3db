"""
Hunt state management with persistence.
"""
import json
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..config.settings import Config, config_manager
from ..models.item import HuntItem, HuntState
from ..models.reward import RewardTier, reward_for_count
from ..models.submission import (
    INCOMPLETE_MESSAGE,
    IN_PROGRESS_MESSAGE,
    SUCCESS_MESSAGE,
    SubmissionPayload,
    SubmissionResult,
)
from ..network.client import SubmissionClient
from ..storage.key_value import KeyValueStore
from .observable import StateListener, StateSubject
from .photos import PhotoEncodingError, encode_photo
from .seed import create_seed_items


_ITEM_LIST = TypeAdapter(List[HuntItem])


class HuntStateManager:
    """Owns the hunt item list, persists it and submits completed hunts.

    Mutations are not locked; callers are expected to make them one at a
    time. Every mutation persists the whole list and then publishes one
    snapshot to subscribers.
    """

    def __init__(self, store: KeyValueStore, client: Optional[SubmissionClient] = None,
                 config: Optional[Config] = None, subject: Optional[StateSubject] = None):
        self.store = store
        self.config = config or config_manager.config
        self.client = client or SubmissionClient(timeout=self.config.submission.timeout_seconds)
        self.subject = subject or StateSubject()

        self._items: List[HuntItem] = []
        self._is_submitting = False
        self._last_submission_message: Optional[str] = None

    @property
    def state_key(self) -> str:
        return self.config.storage.state_key

    @property
    def items(self) -> List[HuntItem]:
        """Get the ordered item list. Items are immutable, so this is safe to hand out."""
        return list(self._items)

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def last_submission_message(self) -> Optional[str]:
        return self._last_submission_message

    def snapshot(self) -> HuntState:
        """Get the current state as observers see it."""
        return HuntState(
            items=list(self._items),
            is_submitting=self._is_submitting,
            last_submission_message=self._last_submission_message
        )

    def subscribe(self, listener: StateListener) -> StateListener:
        return self.subject.subscribe(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        self.subject.unsubscribe(listener)

    def initialize(self) -> List[HuntItem]:
        """Load the item list, seeding and saving a fresh one if none is usable."""
        items = self.load_items()

        if items:
            self._items = items
            print(f"Loaded {len(items)} hunt items ({self.found_count()} found)")
        else:
            self._items = create_seed_items()
            print(f"Starting a new hunt with {len(self._items)} items")
            self.save_items()

        self._publish()
        return self.items

    def load_items(self) -> List[HuntItem]:
        """Read the item list from the store; empty if missing or corrupt."""
        try:
            raw = self.store.get(self.state_key)
        except OSError as e:
            print(f"Error reading hunt state '{self.state_key}': {e}")
            return []

        if raw is None:
            return []

        try:
            return _ITEM_LIST.validate_json(raw)
        except ValidationError as e:
            print(f"Stored hunt state '{self.state_key}' is unreadable, reseeding: {e.error_count()} error(s)")
            return []

    def save_items(self) -> None:
        """Write the full item list to the store."""
        data = [item.model_dump(mode='json', by_alias=True) for item in self._items]

        try:
            self.store.set(self.state_key, json.dumps(data).encode('utf-8'))
        except OSError as e:
            print(f"Error saving hunt state '{self.state_key}': {e}")

    def get_item(self, item_id: str) -> Optional[HuntItem]:
        index = self._find_index(item_id)
        if index is None:
            return None
        return self._items[index]

    def mark_found(self, item_id: str, image_bytes: bytes) -> bool:
        """Attach a photo to an item and mark it found."""
        index = self._find_index(item_id)
        if index is None:
            return False

        try:
            photo = encode_photo(image_bytes, quality=self.config.photos.jpeg_quality)
        except PhotoEncodingError as e:
            print(f"Error attaching photo to '{self._items[index].title}': {e}")
            return False

        self._items[index] = self._items[index].with_photo(photo)
        self.save_items()
        self._publish()
        return True

    def clear_found(self, item_id: str) -> bool:
        """Discard an item's photo and mark it not found."""
        index = self._find_index(item_id)
        if index is None:
            return False

        self._items[index] = self._items[index].without_photo()
        self.save_items()
        self._publish()
        return True

    def reset_all(self) -> None:
        """Mark every item not found, keeping ids, titles, clues and order."""
        self._items = [item.without_photo() for item in self._items]
        self.save_items()
        self._publish()

    def found_count(self) -> int:
        return sum(1 for item in self._items if item.found)

    def total_count(self) -> int:
        return len(self._items)

    def reward(self) -> Optional[RewardTier]:
        """Get the best reward earned so far, or None."""
        return reward_for_count(self.found_count())

    async def submit(self) -> SubmissionResult:
        """Post the completed hunt once.

        Only a fully found hunt is sent. Item state is never changed by the
        outcome; only the submitting flag and the last message are.
        """
        if not self.snapshot().is_complete():
            return self._finish_submission(SubmissionResult(success=False, message=INCOMPLETE_MESSAGE))

        if self._is_submitting:
            return SubmissionResult(success=False, message=IN_PROGRESS_MESSAGE)

        self._is_submitting = True
        self._publish()

        payload = SubmissionPayload.from_items(self._items)
        try:
            response = await self.client.post_json(self.config.submission.url, payload.to_json_dict())
        finally:
            self._is_submitting = False

        if not response.ok:
            result = SubmissionResult(
                success=False,
                message=f"Failed: {response.error}",
                network_attempted=True
            )
        elif self.config.submission.treat_error_status_as_failure and not response.is_success_status():
            result = SubmissionResult(
                success=False,
                message=f"Failed: HTTP {response.status_code} {response.reason}".rstrip(),
                network_attempted=True,
                status_code=response.status_code
            )
        else:
            result = SubmissionResult(
                success=True,
                message=SUCCESS_MESSAGE,
                network_attempted=True,
                status_code=response.status_code
            )

        return self._finish_submission(result)

    def _finish_submission(self, result: SubmissionResult) -> SubmissionResult:
        self._last_submission_message = result.message
        self._publish()
        return result

    def _find_index(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def _publish(self) -> None:
        self.subject.publish(self.snapshot())
