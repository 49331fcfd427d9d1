"""
Turn change schemas - Pydantic models for batches handed over by the game engine

The wire format is camelCase, one record per item change:

    {"itemChanges": [{"type": "acquire", "acquiredItem": {...}},
                     {"type": "loss", "lostItem": {...}},
                     {"type": "update", "oldItem": {...}, "newItem": {...}}],
     "scoreChangedBy": 0, ...}

Records with a missing payload are accepted here and dropped later by the
classifier; unknown item types and malformed fields are rejected.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models.domain.item import Item, KnownUse
from models.domain.turn_changes import ItemChange, TurnChanges
from models.enums import ChangeRecordType, ItemType
from models.exceptions import PayloadValidationError


class KnownUseSchema(BaseModel):
    """Discovered way to use an item"""
    action_name: str = Field(alias="actionName", description="Button label (e.g. 'Light torch')")
    description: Optional[str] = Field(None, description="What the player learned about this use")
    prompt_effect: Optional[str] = Field(None, alias="promptEffect", description="Prompt sent when used")
    applies_when_active: Optional[bool] = Field(None, alias="appliesWhenActive")
    applies_when_inactive: Optional[bool] = Field(None, alias="appliesWhenInactive")

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> KnownUse:
        return KnownUse(
            action_name=self.action_name,
            description=self.description,
            prompt_effect=self.prompt_effect,
            applies_when_active=self.applies_when_active,
            applies_when_inactive=self.applies_when_inactive,
        )


class ItemSchema(BaseModel):
    """Item snapshot"""
    name: str = Field(description="Item name, unique within the inventory")
    type: ItemType = Field(description="Item category (e.g. 'equipment', 'status effect')")
    description: str = Field("", description="Card text")
    active_description: Optional[str] = Field(None, alias="activeDescription")
    is_active: bool = Field(False, alias="isActive")
    tags: List[str] = Field(default_factory=list)
    known_uses: List[KnownUseSchema] = Field(default_factory=list, alias="knownUses")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Torch",
                "type": "equipment",
                "description": "An unlit wooden torch.",
                "activeDescription": "The torch burns brightly.",
                "isActive": False,
                "tags": [],
                "knownUses": [{"actionName": "Light", "appliesWhenInactive": True}]
            }
        },
    )

    def to_domain(self) -> Item:
        return Item(
            name=self.name,
            type=self.type,
            description=self.description,
            active_description=self.active_description,
            is_active=self.is_active,
            tags=tuple(self.tags),
            known_uses=tuple(ku.to_domain() for ku in self.known_uses),
        )


class ItemChangeRecordSchema(BaseModel):
    """One item change record"""
    type: ChangeRecordType = Field(description="'acquire', 'loss' or 'update'")
    acquired_item: Optional[ItemSchema] = Field(None, alias="acquiredItem")
    lost_item: Optional[ItemSchema] = Field(None, alias="lostItem")
    old_item: Optional[ItemSchema] = Field(None, alias="oldItem")
    new_item: Optional[ItemSchema] = Field(None, alias="newItem")

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> ItemChange:
        if self.type == ChangeRecordType.ACQUIRE:
            return ItemChange.gain(self.acquired_item.to_domain() if self.acquired_item else None)
        if self.type == ChangeRecordType.LOSS:
            return ItemChange.loss(self.lost_item.to_domain() if self.lost_item else None)
        return ItemChange.transform(
            self.old_item.to_domain() if self.old_item else None,
            self.new_item.to_domain() if self.new_item else None,
        )


class TurnChangesSchema(BaseModel):
    """Complete batch of one turn"""
    item_changes: List[ItemChangeRecordSchema] = Field(default_factory=list, alias="itemChanges")
    score_changed_by: int = Field(0, alias="scoreChangedBy")
    objective_achieved: bool = Field(False, alias="objectiveAchieved")
    main_quest_achieved: bool = Field(False, alias="mainQuestAchieved")
    objective_text_changed: bool = Field(False, alias="objectiveTextChanged")
    main_quest_text_changed: bool = Field(False, alias="mainQuestTextChanged")
    local_time_changed: bool = Field(False, alias="localTimeChanged")
    local_environment_changed: bool = Field(False, alias="localEnvironmentChanged")
    local_place_changed: bool = Field(False, alias="localPlaceChanged")
    map_data_changed: bool = Field(False, alias="mapDataChanged")

    model_config = ConfigDict(populate_by_name=True)

    def to_domain(self) -> TurnChanges:
        """Build a fresh TurnChanges object (a new identity on every call)"""
        return TurnChanges(
            item_changes=[record.to_domain() for record in self.item_changes],
            score_changed_by=self.score_changed_by,
            objective_achieved=self.objective_achieved,
            main_quest_achieved=self.main_quest_achieved,
            objective_text_changed=self.objective_text_changed,
            main_quest_text_changed=self.main_quest_text_changed,
            local_time_changed=self.local_time_changed,
            local_environment_changed=self.local_environment_changed,
            local_place_changed=self.local_place_changed,
            map_data_changed=self.map_data_changed,
        )


def parse_turn_changes(data: Dict[str, Any]) -> TurnChanges:
    """
    Validate a raw batch dict and convert it to the domain model.

    Raises:
        PayloadValidationError: payload does not match the schema
    """
    try:
        return TurnChangesSchema.model_validate(data).to_domain()
    except ValidationError as e:
        raise PayloadValidationError(f"Invalid turn changes payload: {e.error_count()} error(s)", errors=e.errors()) from e
