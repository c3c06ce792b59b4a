"""
Delivery Options Routes.

HTTP surface for the local pickup delivery option generator. The host posts
the function input and receives the operations to apply.

Key behaviors:
- Body validated against the host input schema (422 on mismatch)
- Zero or one "add" operation per call
- Cost serialized as an exact decimal string
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from local_pickup.api.deps import get_pickup_config
from local_pickup.api.schemas import (
    FunctionInputModel,
    FunctionRunResultModel,
    PickupConfigResponse,
)
from local_pickup.components.pickup import PickupConfig, run

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/run", response_model=FunctionRunResultModel)
def run_delivery_options(
    body: FunctionInputModel,
    config: PickupConfig = Depends(get_pickup_config),
) -> FunctionRunResultModel:
    """Evaluate one cart and return the delivery options to add."""
    result = run(body.to_domain(), config)
    logger.info(f"Delivery option evaluation: operations={len(result.operations)}")
    return FunctionRunResultModel.from_domain(result)


@router.get("/config", response_model=PickupConfigResponse)
def get_config(
    config: PickupConfig = Depends(get_pickup_config),
) -> PickupConfigResponse:
    """Active pickup policy."""
    return PickupConfigResponse.from_domain(config)
