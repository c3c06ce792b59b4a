"""
Pickup component - Local pickup delivery option generator.

Pure functions deciding whether a cart is offered a local print shop pickup
option, and with which location and instruction.

Invariants:
- At most one operation is emitted per evaluation
- Cost is exact (Decimal) and zero by default
- The first supplied location wins; no sorting
- No schema-valid input raises
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, cast

from .models import (
    CartSnapshot,
    DeliveryOptionGenerator,
    DeliveryOptionOperation,
    FunctionInput,
    FunctionRunResult,
    GeneratorSettings,
    Location,
    NoLocationPolicy,
    PickupConfig,
    PickupLocation,
)
from .ports import PickupRulesPort

logger = logging.getLogger(__name__)

SUSTAINABILITY_SUFFIX = (
    ". \U0001f331 Printed locally to reduce shipping impact and support your community!"
)

EMPTY_RESULT = FunctionRunResult(operations=())


# --- Eligibility ---


def is_eligible(cart: CartSnapshot, config: PickupConfig | None = None) -> bool:
    """
    Check whether the cart opted into local pickup.

    The attribute value must match a trigger value exactly and the cart
    must contain at least one line. Missing data means not eligible.
    """
    config = config or PickupConfig()

    if cart.attribute is None or cart.attribute.value is None:
        return False

    if cart.attribute.value not in config.trigger_values:
        return False

    return len(cart.lines) > 0


# --- Location Resolution ---


def resolve_location(
    locations: Sequence[Location],
    config: PickupConfig | None = None,
) -> str | None:
    """
    Pick the location handle for the pickup option.

    Returns the first location's handle as supplied by the host. With no
    locations, returns the virtual location handle, or None when the
    policy is "no_option".
    """
    config = config or PickupConfig()

    if locations:
        return locations[0].handle

    if config.no_location_policy == "no_option":
        return None

    return config.virtual_location_handle


# --- Option Building ---


def build_option(
    handle: str,
    config: PickupConfig | None = None,
    instruction: str | None = None,
) -> DeliveryOptionOperation:
    """Build the pickup delivery option for a resolved location handle."""
    config = config or PickupConfig()

    return DeliveryOptionOperation(
        title=config.title,
        cost=config.cost,
        pickup_location=PickupLocation(
            location_handle=handle,
            pickup_instruction=(
                instruction if instruction is not None else config.pickup_instruction
            ),
        ),
        metafields=None,
    )


# --- Generator Settings ---


def parse_generator_settings(
    generator: DeliveryOptionGenerator | None,
) -> GeneratorSettings:
    """
    Decode merchant settings from the generator metafield.

    Absent or unreadable settings fall back to defaults (enabled).
    """
    if generator is None or not generator.metafield_value:
        return GeneratorSettings()

    try:
        data: Any = json.loads(generator.metafield_value)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and runaway nesting
        logger.warning(f"Ignoring malformed generator metafield: {e}")
        return GeneratorSettings()

    if not isinstance(data, dict):
        logger.warning(
            f"Ignoring generator metafield: expected object, got {type(data).__name__}"
        )
        return GeneratorSettings()

    enabled = data.get("enabled", True)
    if not isinstance(enabled, bool):
        enabled = True

    pickup_time = data.get("defaultPickupTime")
    if not isinstance(pickup_time, str) or not pickup_time:
        pickup_time = None

    return GeneratorSettings(
        enabled=enabled,
        default_pickup_time=pickup_time,
        sustainability_message=data.get("sustainabilityMessage") is True,
    )


def pickup_instruction_for(
    settings: GeneratorSettings,
    config: PickupConfig | None = None,
) -> str:
    """Instruction text shown to the buyer."""
    config = config or PickupConfig()

    if settings.default_pickup_time is None:
        return config.pickup_instruction

    instruction = f"Ready for pickup in {settings.default_pickup_time}"
    if settings.sustainability_message:
        instruction += SUSTAINABILITY_SUFFIX
    return instruction


# --- Configuration ---


def load_config_from_rules(rules: PickupRulesPort | None) -> PickupConfig:
    """
    Load PickupConfig from the pickup section of rules.yaml.

    Args:
        rules: Validated pickup rules, or None for the canonical defaults

    Returns:
        PickupConfig instance
    """
    if rules is None:
        return PickupConfig()

    return PickupConfig(
        trigger_values=frozenset(rules.trigger_values),
        no_location_policy=cast(NoLocationPolicy, rules.no_location_policy),
        virtual_location_handle=rules.virtual_location_handle,
        title=rules.title,
        pickup_instruction=rules.pickup_instruction,
        cost=rules.cost,
    )


# --- Component Entry Point ---


def run(input_data: FunctionInput, config: PickupConfig | None = None) -> FunctionRunResult:
    """
    Evaluate one cart and return the delivery options to add.

    This is the main entry point following the atomic component pattern.

    Args:
        input_data: Parsed function input
        config: Pickup policy (canonical defaults when None)

    Returns:
        FunctionRunResult with zero or one operation
    """
    config = config or PickupConfig()

    settings = parse_generator_settings(input_data.delivery_option_generator)
    if not settings.enabled:
        logger.debug("Pickup generator disabled by metafield settings")
        return EMPTY_RESULT

    if not is_eligible(input_data.cart, config):
        logger.debug(
            f"Cart not eligible for pickup: "
            f"lines={len(input_data.cart.lines)}"
        )
        return EMPTY_RESULT

    handle = resolve_location(input_data.locations, config)
    if handle is None:
        logger.debug("No pickup location available, emitting no option")
        return EMPTY_RESULT

    logger.debug(f"Offering pickup at location_handle={handle}")

    option = build_option(handle, config, pickup_instruction_for(settings, config))
    return FunctionRunResult(operations=(option,))
