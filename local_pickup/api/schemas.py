from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

from local_pickup.components.pickup import (
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
    Location,
    Merchandise,
    PickupConfig,
    PickupLocation,
    Product,
    ProductVariant,
)


# --- Input (host schema, camelCase on the wire) ---
class HostModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AttributeModel(HostModel):
    value: str | None = None


class ProductModel(HostModel):
    id: str
    title: str | None = None
    handle: str | None = None


class ProductVariantModel(HostModel):
    typename: Literal["ProductVariant"] = Field(default="ProductVariant", alias="__typename")
    id: str
    product: ProductModel | None = None

    def to_domain(self) -> ProductVariant:
        product = None
        if self.product is not None:
            product = Product(
                id=self.product.id,
                title=self.product.title,
                handle=self.product.handle,
            )
        return ProductVariant(id=self.id, product=product)


class CustomProductModel(HostModel):
    typename: Literal["CustomProduct"] = Field(default="CustomProduct", alias="__typename")
    title: str | None = None

    def to_domain(self) -> CustomProduct:
        return CustomProduct(title=self.title)


def _merchandise_tag(value: Any) -> str:
    # Untagged payloads carrying a variant id are product variants
    if isinstance(value, dict):
        tag = value.get("__typename") or value.get("typename")
        if tag:
            return str(tag)
        return "ProductVariant" if "id" in value else "CustomProduct"
    return str(getattr(value, "typename", "ProductVariant"))


MerchandiseModel = Annotated[
    Annotated[ProductVariantModel, Tag("ProductVariant")]
    | Annotated[CustomProductModel, Tag("CustomProduct")],
    Discriminator(_merchandise_tag),
]


class CartLineModel(HostModel):
    id: str
    quantity: int = 1
    merchandise: MerchandiseModel | None = None

    def to_domain(self) -> CartLine:
        merchandise: Merchandise | None = None
        if self.merchandise is not None:
            merchandise = self.merchandise.to_domain()
        return CartLine(id=self.id, quantity=self.quantity, merchandise=merchandise)


class CartModel(HostModel):
    attribute: AttributeModel | None = None
    lines: list[CartLineModel]

    def to_domain(self) -> CartSnapshot:
        attribute = None
        if self.attribute is not None:
            attribute = CartAttribute(value=self.attribute.value)
        return CartSnapshot(
            attribute=attribute,
            lines=tuple(line.to_domain() for line in self.lines),
        )


class AddressModel(HostModel):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    province_code: str | None = None
    country_code: str | None = None
    zip: str | None = None


class LocationModel(HostModel):
    handle: str
    name: str | None = None
    address: AddressModel | None = None

    def to_domain(self) -> Location:
        address = None
        if self.address is not None:
            address = Address(**self.address.model_dump())
        return Location(handle=self.handle, name=self.name, address=address)


class LineRefModel(HostModel):
    id: str


class DeliveryGroupRefModel(HostModel):
    id: str


class FulfillmentGroupModel(HostModel):
    handle: str
    lines: list[LineRefModel] = []
    delivery_group: DeliveryGroupRefModel | None = None
    inventory_location_handles: list[str] = []

    def to_domain(self) -> FulfillmentGroup:
        return FulfillmentGroup(
            handle=self.handle,
            line_ids=tuple(line.id for line in self.lines),
            delivery_group_id=self.delivery_group.id if self.delivery_group else None,
            inventory_location_handles=tuple(self.inventory_location_handles),
        )


class MetafieldModel(HostModel):
    value: str | None = None


class DeliveryOptionGeneratorModel(HostModel):
    metafield: MetafieldModel | None = None

    def to_domain(self) -> DeliveryOptionGenerator:
        value = self.metafield.value if self.metafield else None
        return DeliveryOptionGenerator(metafield_value=value)


class FunctionInputModel(HostModel):
    cart: CartModel
    locations: list[LocationModel] = []
    fulfillment_groups: list[FulfillmentGroupModel] = []
    delivery_option_generator: DeliveryOptionGeneratorModel | None = None

    def to_domain(self) -> FunctionInput:
        generator = None
        if self.delivery_option_generator is not None:
            generator = self.delivery_option_generator.to_domain()
        return FunctionInput(
            cart=self.cart.to_domain(),
            locations=tuple(loc.to_domain() for loc in self.locations),
            fulfillment_groups=tuple(g.to_domain() for g in self.fulfillment_groups),
            delivery_option_generator=generator,
        )


# --- Output (snake_case on the wire) ---
class PickupLocationModel(BaseModel):
    location_handle: str
    pickup_instruction: str | None = None


class LocalPickupOptionModel(BaseModel):
    title: str
    cost: Decimal
    pickup_location: PickupLocationModel
    metafields: list[dict[str, str]] | None = None

    @classmethod
    def from_domain(cls, op: DeliveryOptionOperation) -> "LocalPickupOptionModel":
        return cls(
            title=op.title,
            cost=op.cost,
            pickup_location=PickupLocationModel(
                location_handle=op.pickup_location.location_handle,
                pickup_instruction=op.pickup_location.pickup_instruction,
            ),
            metafields=list(op.metafields) if op.metafields is not None else None,
        )


class OperationModel(BaseModel):
    add: LocalPickupOptionModel


class FunctionRunResultModel(BaseModel):
    operations: list[OperationModel] = []

    @classmethod
    def from_domain(cls, result: FunctionRunResult) -> "FunctionRunResultModel":
        return cls(
            operations=[
                OperationModel(add=LocalPickupOptionModel.from_domain(op))
                for op in result.operations
            ]
        )


# --- Config ---
class PickupConfigResponse(BaseModel):
    trigger_values: list[str]
    no_location_policy: str
    virtual_location_handle: str
    title: str
    pickup_instruction: str
    cost: Decimal

    @classmethod
    def from_domain(cls, config: PickupConfig) -> "PickupConfigResponse":
        return cls(
            trigger_values=sorted(config.trigger_values),
            no_location_policy=config.no_location_policy,
            virtual_location_handle=config.virtual_location_handle,
            title=config.title,
            pickup_instruction=config.pickup_instruction,
            cost=config.cost,
        )
