import copy
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

LINE = {
    "id": "gid://shopify/CartLine/1",
    "quantity": 1,
    "merchandise": {
        "__typename": "ProductVariant",
        "id": "gid://shopify/ProductVariant/1",
        "product": {"id": "gid://shopify/Product/1", "title": "Test Product"},
    },
}

LOCATION = {
    "handle": "test_location",
    "name": "Test Location",
    "address": {
        "address1": "123 Test St",
        "address2": None,
        "city": "Test City",
        "provinceCode": "CA",
        "countryCode": "US",
        "zip": "12345",
    },
}


@pytest.fixture
def rules_path() -> Path:
    """The project's real rules.yaml."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def pickup_payload() -> dict[str, Any]:
    """Host input opting into pickup, with one POS location."""
    return {
        "cart": {"attribute": {"value": "pickup"}, "lines": [copy.deepcopy(LINE)]},
        "fulfillmentGroups": [
            {
                "handle": "1",
                "lines": [{"id": "gid://shopify/CartLine/1"}],
                "deliveryGroup": {"id": "gid://shopify/CartDeliveryGroup/1"},
                "inventoryLocationHandles": ["test_location"],
            }
        ],
        "locations": [copy.deepcopy(LOCATION)],
        "deliveryOptionGenerator": {"metafield": None},
    }


@pytest.fixture
def no_attribute_payload(pickup_payload: dict[str, Any]) -> dict[str, Any]:
    """Host input without the pickup attribute."""
    pickup_payload["cart"]["attribute"] = None
    pickup_payload["locations"] = []
    pickup_payload["fulfillmentGroups"] = []
    return pickup_payload
