"""
Pickup component - Local pickup delivery option generator.
"""

from .component import (
    SUSTAINABILITY_SUFFIX,
    build_option,
    is_eligible,
    load_config_from_rules,
    parse_generator_settings,
    pickup_instruction_for,
    resolve_location,
    run,
)
from .models import (
    NO_LOCATION_POLICY,
    PICKUP_COST,
    PICKUP_INSTRUCTION,
    PICKUP_TITLE,
    TRIGGER_VALUES,
    VIRTUAL_LOCATION_HANDLE,
    Address,
    CartAttribute,
    CartLine,
    CartSnapshot,
    CustomProduct,
    DeliveryOptionGenerator,
    DeliveryOptionOperation,
    FulfillmentGroup,
    FunctionInput,
    FunctionRunResult,
    GeneratorSettings,
    Location,
    Merchandise,
    NoLocationPolicy,
    PickupConfig,
    PickupLocation,
    Product,
    ProductVariant,
)
from .ports import PickupRulesPort

__all__ = [
    # Entry points
    "run",
    "is_eligible",
    "resolve_location",
    "build_option",
    "parse_generator_settings",
    "pickup_instruction_for",
    "load_config_from_rules",
    # Policy constants
    "NO_LOCATION_POLICY",
    "PICKUP_COST",
    "PICKUP_INSTRUCTION",
    "PICKUP_TITLE",
    "SUSTAINABILITY_SUFFIX",
    "TRIGGER_VALUES",
    "VIRTUAL_LOCATION_HANDLE",
    "NoLocationPolicy",
    "PickupConfig",
    # Input models
    "Address",
    "CartAttribute",
    "CartLine",
    "CartSnapshot",
    "CustomProduct",
    "DeliveryOptionGenerator",
    "FulfillmentGroup",
    "FunctionInput",
    "GeneratorSettings",
    "Location",
    "Merchandise",
    "Product",
    "ProductVariant",
    # Output models
    "DeliveryOptionOperation",
    "FunctionRunResult",
    "PickupLocation",
    # Ports
    "PickupRulesPort",
]
