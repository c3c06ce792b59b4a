"""
Pickup component port definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol


class PickupRulesPort(Protocol):
    """Pickup section of the rules configuration."""

    @property
    def trigger_values(self) -> Sequence[str]:
        """Cart attribute values that opt into pickup."""
        ...

    @property
    def no_location_policy(self) -> str:
        """Either "virtual_location" or "no_option"."""
        ...

    @property
    def virtual_location_handle(self) -> str: ...

    @property
    def title(self) -> str: ...

    @property
    def pickup_instruction(self) -> str: ...

    @property
    def cost(self) -> Decimal: ...
