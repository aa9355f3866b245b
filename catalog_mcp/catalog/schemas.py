"""
Schema definitions for the catalog module.

``CatalogItem`` documents the keys the search pipeline understands.
Catalog records are open-ended: any of these keys may be missing and
any other key is carried through untouched, so records are handled as
plain mappings and never coerced into a model.

``SearchRequest`` is the single place where tool input is validated
and where defaults are filled in. ``SearchOutput`` describes the
structured payload returned to the host and rendered by the widget.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Literal, TypedDict

from ..config import DEFAULT_LIMIT, MAX_LIMIT


class CatalogItem(TypedDict, total=False):
    """A single catalog record as read from disk.

    Only the recognised keys are listed here. Records routinely carry
    extra keys (sku, stock, images...) which are preserved verbatim.
    """

    id: Union[str, int, float]
    title: str
    name: str
    description: str
    category: str
    price: float


SortField = Literal["relevance", "price", "title"]
SortOrder = Literal["asc", "desc"]


class SearchRequest(BaseModel):
    """Validated arguments of the ``search_catalog`` tool.

    Field aliases match the wire names (``sortBy``). Unknown keys are
    ignored; wrong types, out-of-range limits and unknown enum values
    raise ``pydantic.ValidationError``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    q: str = Field(
        default="",
        description="Full-text query across title/name/description",
    )
    category: Optional[str] = Field(
        default=None,
        description="Only return items in this category (case-insensitive)",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=MAX_LIMIT,
        strict=True,
        description="Maximum number of items to return",
    )
    sort_by: SortField = Field(
        default="relevance",
        alias="sortBy",
        description="Sort key",
    )
    order: SortOrder = Field(default="asc", description="Sort direction")


class SearchOutput(BaseModel):
    """Structured content returned by ``search_catalog``."""

    items: List[Dict[str, Any]]
