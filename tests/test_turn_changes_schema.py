import pytest

from models.enums import ChangeKind, ItemType
from models.exceptions import PayloadValidationError
from schemas import ItemSchema, parse_turn_changes

TORCH = {
    "name": "Torch",
    "type": "equipment",
    "description": "An unlit wooden torch.",
    "activeDescription": "The torch burns brightly.",
    "isActive": False,
    "knownUses": [{"actionName": "Light", "appliesWhenInactive": True}],
}


def test_full_batch_converts_to_domain():
    batch = parse_turn_changes({
        "itemChanges": [
            {"type": "acquire", "acquiredItem": {"name": "Coin", "type": "single-use"}},
            {"type": "loss", "lostItem": {"name": "Bread", "type": "single-use", "tags": ["junk"]}},
            {"type": "update", "oldItem": TORCH, "newItem": {**TORCH, "isActive": True}},
        ],
        "scoreChangedBy": 5,
        "objectiveAchieved": True,
    })

    gain, loss, transform = batch.item_changes
    assert gain.kind is ChangeKind.GAIN and gain.item.name == "Coin"
    assert loss.kind is ChangeKind.LOSS and loss.item.is_junk
    assert transform.kind is ChangeKind.TRANSFORM
    assert transform.old_item.is_active is False
    assert transform.new_item.is_active is True
    assert transform.new_item.known_uses[0].applies_when_inactive is True
    assert batch.score_changed_by == 5
    assert batch.objective_achieved is True
    assert batch.map_data_changed is False


def test_item_defaults():
    item = ItemSchema.model_validate({"name": "Rumour", "type": "knowledge"}).to_domain()

    assert item.type is ItemType.KNOWLEDGE
    assert item.description == ""
    assert item.active_description is None
    assert item.tags == ()
    assert item.known_uses == ()


def test_field_names_accepted_alongside_aliases():
    item = ItemSchema.model_validate({
        "name": "Torch",
        "type": "equipment",
        "is_active": True,
        "known_uses": [{"action_name": "Douse", "applies_when_active": True}],
    }).to_domain()

    assert item.is_active is True
    assert item.known_uses[0].action_name == "Douse"
    assert item.known_uses[0].applies_when_active is True
    assert ItemSchema.model_json_schema()["example"]["name"] == "Torch"


def test_status_effect_type_with_space():
    item = ItemSchema.model_validate({"name": "Poisoned", "type": "status effect"}).to_domain()
    assert item.type is ItemType.STATUS_EFFECT


def test_missing_payload_is_kept_for_classifier():
    batch = parse_turn_changes({"itemChanges": [{"type": "acquire"}, {"type": "update", "newItem": TORCH}]})

    assert batch.item_changes[0].item is None
    assert batch.item_changes[1].old_item is None
    assert batch.item_changes[1].new_item.name == "Torch"


def test_each_parse_returns_new_identity():
    doc = {"itemChanges": []}
    assert parse_turn_changes(doc) is not parse_turn_changes(doc)


@pytest.mark.parametrize("doc", [
    {"itemChanges": [{"type": "teleport"}]},
    {"itemChanges": [{"type": "acquire", "acquiredItem": {"name": "X", "type": "spaceship"}}]},
    {"itemChanges": [{"type": "loss", "lostItem": {"type": "key"}}]},
    {"itemChanges": "none"},
])
def test_invalid_documents_rejected(doc):
    with pytest.raises(PayloadValidationError) as exc_info:
        parse_turn_changes(doc)
    assert exc_info.value.errors
