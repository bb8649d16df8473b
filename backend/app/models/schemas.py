"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, field_validator, model_validator

EventType = Literal[
    "edit_source",
    "edit_target",
    "set_source_unit",
    "set_target_unit",
    "swap",
    "reset",
    "preset",
]

_NEEDS_VALUE = {"edit_source", "edit_target"}
_NEEDS_UNIT = {"set_source_unit", "set_target_unit"}


class UnitResponse(BaseModel):
    id: str
    name: str
    is_base: bool = False


class PresetResponse(BaseModel):
    index: int
    label: str
    source_unit: str
    target_unit: str
    value: str


class DimensionSummary(BaseModel):
    id: str
    title: str
    description: str
    default_source: str
    default_target: str
    format_policy: str
    unit_count: int


class DimensionDetail(DimensionSummary):
    base_unit: str
    units: list[UnitResponse]
    presets: list[PresetResponse]


class ConvertRequest(BaseModel):
    dimension: str
    value: str
    from_unit: str
    to_unit: str


class ConvertResponse(BaseModel):
    dimension: str
    value: str
    from_unit: str
    to_unit: str
    result: str


class SessionModel(BaseModel):
    source_unit: str
    target_unit: str
    source_value: str = ""
    target_value: str = ""
    last_edited: Literal["source", "target"] = "source"


class SessionEvent(BaseModel):
    type: EventType
    value: Optional[str] = None
    unit: Optional[str] = None
    preset_index: Optional[int] = None

    @field_validator("preset_index")
    @classmethod
    def index_not_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("preset_index must be non-negative")
        return v

    @model_validator(mode="after")
    def check_payload(self) -> "SessionEvent":
        if self.type in _NEEDS_VALUE and self.value is None:
            raise ValueError(f"Event '{self.type}' requires 'value'")
        if self.type in _NEEDS_UNIT and not self.unit:
            raise ValueError(f"Event '{self.type}' requires 'unit'")
        if self.type == "preset" and self.preset_index is None:
            raise ValueError("Event 'preset' requires 'preset_index'")
        return self


class NewSessionRequest(BaseModel):
    dimension: Optional[str] = None


class SessionEventRequest(BaseModel):
    dimension: str
    session: SessionModel
    event: SessionEvent


class SessionResponse(BaseModel):
    dimension: str
    session: SessionModel
