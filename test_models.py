"""
Tests for Scavenger Hunt models.
"""
import base64
import json

import pytest
from pydantic import ValidationError

from scavenger_hunt.models.item import HuntItem, HuntState
from scavenger_hunt.models.reward import REWARD_TIERS, reward_for_count
from scavenger_hunt.models.submission import SubmissionPayload, TransportResult


def test_item_defaults():
    """Test a new item starts unfound with a UUID id."""
    print("=== Testing Item Defaults ===")

    item = HuntItem(title="Toy Car", clue="Window display at Tiny Toys.")
    print(f"Created item: {item.title} ({item.id})")

    assert item.found is False
    assert item.photo_data is None
    assert len(item.id) == 36

    other = HuntItem(title="Toy Car", clue="Window display at Tiny Toys.")
    assert other.id != item.id


def test_photo_invariant():
    """Test that found and photo always travel together."""
    print("=== Testing Photo Invariant ===")

    with pytest.raises(ValidationError):
        HuntItem(title="Yellow Button", clue="At Tailor Tim's counter.", found=True)

    with pytest.raises(ValidationError):
        HuntItem(title="Yellow Button", clue="At Tailor Tim's counter.", photo_data=b"jpeg")

    item = HuntItem(title="Yellow Button", clue="At Tailor Tim's counter.")

    # Items are frozen; state only changes through copies
    with pytest.raises(ValidationError):
        item.found = True

    found = item.with_photo(b"jpeg")
    assert found.found and found.photo_data == b"jpeg"
    assert found.id == item.id

    with pytest.raises(ValidationError):
        found.photo_data = b"other"

    cleared = found.without_photo()
    assert not cleared.found and cleared.photo_data is None
    print("✅ Invariant enforced")


def test_item_identity_is_immutable():
    item = HuntItem(title="Toy Car", clue="Window display at Tiny Toys.")

    for field, value in (("id", "0f8fad5b-d9cb-469f-a165-70867728950e"), ("title", "Bus"), ("clue", "Depot")):
        with pytest.raises(ValidationError):
            setattr(item, field, value)


def test_item_wire_format():
    """Test items serialize with base64 photoData and load back."""
    print("=== Testing Item Wire Format ===")

    item = HuntItem(title="Museum Postcard", clue="Gift shop near the entrance.").with_photo(b"\xff\xd8\xff")
    data = item.model_dump(mode='json', by_alias=True)

    assert set(data) == {"id", "title", "clue", "found", "photoData"}
    assert data["photoData"] == base64.b64encode(b"\xff\xd8\xff").decode('ascii')

    loaded = HuntItem.model_validate_json(json.dumps(data))
    assert loaded.model_dump() == item.model_dump()

    unfound = HuntItem(title="Toy Car", clue="Window display at Tiny Toys.")
    assert unfound.model_dump(mode='json', by_alias=True)["photoData"] is None
    assert unfound.photo_base64() == ""


def test_item_rejects_bad_data():
    """Test corrupt stored values fail validation."""
    print("=== Testing Bad Item Data ===")

    with pytest.raises(ValidationError):
        HuntItem(id="not-a-uuid", title="A", clue="B")

    with pytest.raises(ValidationError):
        HuntItem.model_validate({
            "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
            "title": "A",
            "clue": "B",
            "found": True,
            "photoData": "%%% not base64 %%%"
        })


def test_reward_tiers():
    """Test reward thresholds."""
    print("=== Testing Reward Tiers ===")

    expected = {
        0: None, 4: None,
        5: "DISCOUNT10", 6: "DISCOUNT10",
        7: "DISCOUNT20", 9: "DISCOUNT20",
        10: "DISCOUNT20+DRAW", 12: "DISCOUNT20+DRAW",
    }
    for count, code in expected.items():
        tier = reward_for_count(count)
        print(f"{count:>2} found -> {tier or 'no reward'}")
        assert (tier.code if tier else None) == code

    assert reward_for_count(10).description == "20% discount + entry to grand draw"
    assert reward_for_count(7).description == "20% discount"
    assert reward_for_count(5).description == "10% discount"


def test_reward_monotonic():
    """Test that finding more items never lowers the reward."""
    thresholds = []
    for count in range(0, 11):
        tier = reward_for_count(count)
        thresholds.append(tier.threshold if tier else -1)

    assert thresholds == sorted(thresholds)
    assert [t.threshold for t in REWARD_TIERS] == sorted((t.threshold for t in REWARD_TIERS), reverse=True)


def test_hunt_state_counts():
    """Test hunt state helpers."""
    items = [
        HuntItem(title="A", clue="a").with_photo(b"1"),
        HuntItem(title="B", clue="b"),
    ]
    state = HuntState(items=items)

    assert state.found_count() == 1
    assert state.total_count() == 2
    assert not state.is_complete()
    assert not HuntState().is_complete()

    state = HuntState(items=[item.with_photo(b"x") for item in items])
    assert state.is_complete()


def test_submission_payload():
    """Test payload covers every item with empty photos for unfound ones."""
    print("=== Testing Submission Payload ===")

    items = [
        HuntItem(title="Red Coffee Mug", clue="Found at Java House counter.").with_photo(b"mug"),
        HuntItem(title="Toy Car", clue="Window display at Tiny Toys."),
    ]
    payload = SubmissionPayload.from_items(items).to_json_dict()
    print(f"Payload: {payload}")

    assert payload == {
        "foundCount": 1,
        "items": [
            {"title": "Red Coffee Mug", "photoBase64": base64.b64encode(b"mug").decode('ascii')},
            {"title": "Toy Car", "photoBase64": ""},
        ]
    }


def test_transport_result_status():
    assert TransportResult(ok=True, status_code=200).is_success_status()
    assert TransportResult(ok=True, status_code=204).is_success_status()
    assert not TransportResult(ok=True, status_code=500).is_success_status()
    assert not TransportResult(ok=False, error="boom").is_success_status()
