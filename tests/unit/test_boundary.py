"""
Tests for the serialization boundary.

- Host input parsing (camelCase, tagged merchandise, opaque groups)
- Malformed input rejection
- Output shape and exact decimal cost
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import pytest

from local_pickup.api.boundary import (
    InputParseError,
    parse_input,
    run_serialized,
    serialize_result,
)
from local_pickup.components.pickup import (
    CustomProduct,
    DeliveryOptionOperation,
    FunctionRunResult,
    PickupLocation,
    ProductVariant,
)


class TestParseInput:
    def test_parses_cart(self, pickup_payload: dict[str, Any]) -> None:
        inp = parse_input(pickup_payload)

        assert inp.cart.attribute is not None
        assert inp.cart.attribute.value == "pickup"
        assert len(inp.cart.lines) == 1
        line = inp.cart.lines[0]
        assert line.id == "gid://shopify/CartLine/1"
        assert isinstance(line.merchandise, ProductVariant)
        assert line.merchandise.product is not None
        assert line.merchandise.product.title == "Test Product"

    def test_parses_locations_with_camel_case_address(
        self, pickup_payload: dict[str, Any]
    ) -> None:
        inp = parse_input(pickup_payload)

        location = inp.locations[0]
        assert location.handle == "test_location"
        assert location.address is not None
        assert location.address.province_code == "CA"
        assert location.address.country_code == "US"
        assert location.address.address2 is None

    def test_parses_fulfillment_groups(self, pickup_payload: dict[str, Any]) -> None:
        group = parse_input(pickup_payload).fulfillment_groups[0]

        assert group.handle == "1"
        assert group.line_ids == ("gid://shopify/CartLine/1",)
        assert group.delivery_group_id == "gid://shopify/CartDeliveryGroup/1"
        assert group.inventory_location_handles == ("test_location",)

    def test_generator_without_metafield(self, pickup_payload: dict[str, Any]) -> None:
        generator = parse_input(pickup_payload).delivery_option_generator
        assert generator is not None
        assert generator.metafield_value is None

    def test_generator_metafield_value(self, pickup_payload: dict[str, Any]) -> None:
        pickup_payload["deliveryOptionGenerator"] = {"metafield": {"value": '{"enabled": false}'}}
        generator = parse_input(pickup_payload).delivery_option_generator
        assert generator is not None
        assert generator.metafield_value == '{"enabled": false}'

    def test_null_attribute(self, no_attribute_payload: dict[str, Any]) -> None:
        assert parse_input(no_attribute_payload).cart.attribute is None

    def test_custom_product_merchandise(self, pickup_payload: dict[str, Any]) -> None:
        pickup_payload["cart"]["lines"][0]["merchandise"] = {
            "__typename": "CustomProduct",
            "title": "Engraving",
        }
        line = parse_input(pickup_payload).cart.lines[0]
        assert line.merchandise == CustomProduct(title="Engraving")

    def test_untagged_merchandise_with_id_is_variant(
        self, pickup_payload: dict[str, Any]
    ) -> None:
        pickup_payload["cart"]["lines"][0]["merchandise"] = {
            "id": "gid://shopify/ProductVariant/9",
            "product": {"id": "gid://shopify/Product/9", "handle": "test-tshirt"},
        }
        merchandise = parse_input(pickup_payload).cart.lines[0].merchandise
        assert isinstance(merchandise, ProductVariant)
        assert merchandise.product is not None
        assert merchandise.product.handle == "test-tshirt"

    def test_optional_sections_default_empty(self) -> None:
        inp = parse_input({"cart": {"lines": []}})

        assert inp.locations == ()
        assert inp.fulfillment_groups == ()
        assert inp.delivery_option_generator is None

    def test_json_text(self, pickup_payload: dict[str, Any]) -> None:
        assert parse_input(json.dumps(pickup_payload)) == parse_input(pickup_payload)

    def test_json_bytes(self, pickup_payload: dict[str, Any]) -> None:
        raw = json.dumps(pickup_payload).encode("utf-8")
        assert parse_input(raw) == parse_input(pickup_payload)

    def test_non_utf8_bytes(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            parse_input(b'{"cart": {"lines": [], "attribute": {"value": "\xff"}}}')
        assert "UTF-8" in exc_info.value.errors[0]

    def test_invalid_json(self) -> None:
        with pytest.raises(InputParseError):
            parse_input("{not json")

    def test_missing_cart(self) -> None:
        with pytest.raises(InputParseError) as exc_info:
            parse_input({"locations": []})
        assert any(err.startswith("cart") for err in exc_info.value.errors)

    def test_location_without_handle(self, pickup_payload: dict[str, Any]) -> None:
        del pickup_payload["locations"][0]["handle"]
        with pytest.raises(InputParseError):
            parse_input(pickup_payload)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_input({"cart": {"lines": "nope"}})


class TestSerializeResult:
    def test_empty(self) -> None:
        assert serialize_result(FunctionRunResult()) == {"operations": []}

    def test_operation_shape(self) -> None:
        result = FunctionRunResult(
            operations=(
                DeliveryOptionOperation(
                    title="Pickup",
                    cost=Decimal("0"),
                    pickup_location=PickupLocation(
                        location_handle="shop-a", pickup_instruction="Come by"
                    ),
                ),
            )
        )

        assert serialize_result(result) == {
            "operations": [
                {
                    "add": {
                        "title": "Pickup",
                        "cost": "0",
                        "pickup_location": {
                            "location_handle": "shop-a",
                            "pickup_instruction": "Come by",
                        },
                        "metafields": None,
                    }
                }
            ]
        }

    def test_cost_is_exact_string(self) -> None:
        result = FunctionRunResult(
            operations=(
                DeliveryOptionOperation(
                    title="Pickup",
                    cost=Decimal("0.10"),
                    pickup_location=PickupLocation(location_handle="shop-a"),
                ),
            )
        )
        assert serialize_result(result)["operations"][0]["add"]["cost"] == "0.10"


class TestRunSerialized:
    def test_round_trip(self, pickup_payload: dict[str, Any]) -> None:
        output = run_serialized(pickup_payload)

        assert len(output["operations"]) == 1
        assert output["operations"][0]["add"]["pickup_location"]["location_handle"] == (
            "test_location"
        )

    def test_no_attribute(self, no_attribute_payload: dict[str, Any]) -> None:
        assert run_serialized(no_attribute_payload) == {"operations": []}
