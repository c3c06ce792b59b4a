from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from local_pickup.components.pickup import (
    NO_LOCATION_POLICY,
    PICKUP_COST,
    PICKUP_INSTRUCTION,
    PICKUP_TITLE,
    TRIGGER_VALUES,
    VIRTUAL_LOCATION_HANDLE,
)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class PickupRules(BaseModel):
    trigger_values: list[str] = Field(
        default_factory=lambda: sorted(TRIGGER_VALUES), min_length=1
    )
    no_location_policy: Literal["virtual_location", "no_option"] = NO_LOCATION_POLICY
    virtual_location_handle: str = Field(default=VIRTUAL_LOCATION_HANDLE, min_length=1)
    title: str = Field(default=PICKUP_TITLE, min_length=1)
    pickup_instruction: str = Field(default=PICKUP_INSTRUCTION, min_length=1)
    cost: Decimal = Field(default=PICKUP_COST, ge=0)

    @field_validator("trigger_values")
    @classmethod
    def no_blank_triggers(cls, values: list[str]) -> list[str]:
        if any(not v for v in values):
            raise ValueError("trigger_values must not contain empty strings")
        return values

    @field_validator("cost", mode="before")
    @classmethod
    def no_float_cost(cls, value: object) -> object:
        # YAML floats would carry binary rounding into the Decimal
        if isinstance(value, float):
            return str(value)
        return value

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    pickup: PickupRules = Field(default_factory=PickupRules)
    ops: OpsRules = Field(default_factory=OpsRules)
