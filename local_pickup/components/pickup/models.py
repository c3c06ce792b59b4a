"""
Pickup component input/output models.

Plain immutable records mirroring the host's delivery option generator
schema. Address and merchandise fields are pass-through data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

NoLocationPolicy = Literal["virtual_location", "no_option"]

# --- Policy Constants ---

TRIGGER_VALUES: frozenset[str] = frozenset({"pickup", "true"})
VIRTUAL_LOCATION_HANDLE = "diy-label-virtual-location"
NO_LOCATION_POLICY: NoLocationPolicy = "virtual_location"
PICKUP_TITLE = "\U0001f331 Local Print Shop Pickup"
PICKUP_INSTRUCTION = (
    "Your order will be printed at a local print shop and ready for pickup. "
    "You'll receive a notification with pickup details when it's ready."
)
PICKUP_COST = Decimal("0")


@dataclass(frozen=True)
class PickupConfig:
    """
    Pickup policy.

    Defaults are the canonical values; rules.yaml may override any of them.
    """

    trigger_values: frozenset[str] = TRIGGER_VALUES
    no_location_policy: NoLocationPolicy = NO_LOCATION_POLICY
    virtual_location_handle: str = VIRTUAL_LOCATION_HANDLE
    title: str = PICKUP_TITLE
    pickup_instruction: str = PICKUP_INSTRUCTION
    cost: Decimal = PICKUP_COST


# --- Cart ---


@dataclass(frozen=True)
class CartAttribute:
    """Cart attribute carrying the pickup opt-in."""

    value: str | None = None


@dataclass(frozen=True)
class Product:
    id: str
    title: str | None = None
    handle: str | None = None


@dataclass(frozen=True)
class ProductVariant:
    """Merchandise backed by a catalog variant."""

    id: str
    product: Product | None = None


@dataclass(frozen=True)
class CustomProduct:
    """Merchandise created ad hoc by the host (no variant id)."""

    title: str | None = None


Merchandise = ProductVariant | CustomProduct


@dataclass(frozen=True)
class CartLine:
    id: str
    quantity: int = 1
    merchandise: Merchandise | None = None


@dataclass(frozen=True)
class CartSnapshot:
    """Cart as seen by one evaluation. Lines may be empty."""

    attribute: CartAttribute | None = None
    lines: tuple[CartLine, ...] = ()


# --- Locations & Fulfillment ---


@dataclass(frozen=True)
class Address:
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province_code: str | None = None
    country_code: str | None = None
    zip: str | None = None


@dataclass(frozen=True)
class Location:
    """Point-of-sale location registered with the shop."""

    handle: str
    name: str | None = None
    address: Address | None = None


@dataclass(frozen=True)
class FulfillmentGroup:
    """Host grouping of cart lines. Not read by the decision logic."""

    handle: str
    line_ids: tuple[str, ...] = ()
    delivery_group_id: str | None = None
    inventory_location_handles: tuple[str, ...] = ()


@dataclass(frozen=True)
class DeliveryOptionGenerator:
    """Generator owning this function; metafield holds JSON settings."""

    metafield_value: str | None = None


@dataclass(frozen=True)
class GeneratorSettings:
    """Merchant settings decoded from the generator metafield."""

    enabled: bool = True
    default_pickup_time: str | None = None
    sustainability_message: bool = False


# --- Input ---


@dataclass(frozen=True)
class FunctionInput:
    """Input for one delivery option evaluation."""

    cart: CartSnapshot
    locations: tuple[Location, ...] = ()
    fulfillment_groups: tuple[FulfillmentGroup, ...] = ()
    delivery_option_generator: DeliveryOptionGenerator | None = None


# --- Output ---


@dataclass(frozen=True)
class PickupLocation:
    location_handle: str
    pickup_instruction: str | None = None


@dataclass(frozen=True)
class DeliveryOptionOperation:
    """Single "add local pickup delivery option" instruction."""

    title: str
    cost: Decimal
    pickup_location: PickupLocation
    metafields: tuple[dict[str, str], ...] | None = None


@dataclass(frozen=True)
class FunctionRunResult:
    """Output of one evaluation: zero or one operation."""

    operations: tuple[DeliveryOptionOperation, ...] = field(default_factory=tuple)
