"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for the catalog document and lookup results.

Attribute names are snake_case; the document's camelCase keys are accepted
as aliases and restored by ``to_dict()``.

==============================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# criterion dimension id -> selected option value
MatchCriteria = Dict[str, str]


class CatalogModel(BaseModel):
    """Base model for catalog entities: alias-aware, immutable, extras kept."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Dump using the document's camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TreeOption(CatalogModel):
    """
    One selectable value for a criterion dimension.

    Attributes:
        value: Value stored in match criteria (e.g., "fortigate")
        label: Display label
        label_ar: Arabic display label
        children: Nested dimension revealed by selecting this option
    """

    value: str
    label: str = ""
    label_ar: str = Field(default="", alias="labelAr")
    children: Optional[TreeNode] = None


class TreeNode(CatalogModel):
    """
    One criterion dimension (e.g., "cpu") of an addon's option tree.

    Attributes:
        id: Criterion dimension id, used as the key in match criteria
        label: Display label
        label_ar: Arabic display label
        type: Control type hint for the host UI
        required: Whether the host UI requires a selection
        options: Ordered selectable values
    """

    id: str
    label: str = ""
    label_ar: str = Field(default="", alias="labelAr")
    type: str = ""
    required: bool = False
    options: List[TreeOption] = Field(default_factory=list)


class Addon(CatalogModel):
    """
    Configurable product family with its option tree.

    Attributes:
        id: Addon id, referenced by Product.addon_type
        name: Display name
        name_ar: Arabic display name
        max_instances: Maximum instances a customer may add
        item_choice_key: Host-side item choice key
        pricing_key: Host-side pricing key
        tree: Root of the option tree
    """

    id: str
    name: str = ""
    name_ar: str = Field(default="", alias="nameAr")
    max_instances: int = Field(default=0, alias="maxInstances")
    item_choice_key: str = Field(default="", alias="itemChoiceKey")
    pricing_key: str = Field(default="", alias="pricingKey")
    tree: TreeNode


class Product(CatalogModel):
    """
    Product identified by a full set of match criteria.

    Attributes:
        id: Product id, unique within the catalog
        addon_type: Id of the owning addon
        match_criteria: Criterion id -> option value
    """

    id: str
    addon_type: Optional[str] = Field(default=None, alias="addonType")
    match_criteria: MatchCriteria = Field(alias="matchCriteria")


class CatalogAttributes(CatalogModel):
    """Body of the catalog document."""

    control_type: str = Field(default="", alias="controlType")
    config_group_name: str = Field(default="", alias="configGroupName")
    addons: List[Addon] = Field(default_factory=list)
    products: List[Product] = Field(default_factory=list)

    @field_validator("addons", "products", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        """Treat null sequences as empty."""
        return [] if value is None else value


class CatalogDocument(CatalogModel):
    """Top-level catalog document: ``{"attributes": {...}}``."""

    attributes: CatalogAttributes


# =============================================================================
# LOOKUP RESULTS
# =============================================================================

class ProductEntry(CatalogModel):
    """Product id with its stored criteria, as returned by list/search."""

    id: str
    criteria: MatchCriteria


class EnrichedCriteria(CatalogModel):
    """
    Display-ready view of a product.

    Attributes:
        product_id: Product id
        addon_type: Id of the owning addon
        match_criteria: Stored criteria
        selected_options: Criterion id -> option chosen along the tree path
        addon: Owning addon definition
    """

    product_id: str = Field(alias="productId")
    addon_type: str = Field(alias="addonType")
    match_criteria: MatchCriteria = Field(alias="matchCriteria")
    selected_options: Dict[str, TreeOption] = Field(
        default_factory=dict, alias="selectedOptions"
    )
    addon: Addon


TreeOption.model_rebuild()
TreeNode.model_rebuild()
