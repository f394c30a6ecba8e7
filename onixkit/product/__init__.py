"""Product module - ONIX <Product> records as typed, cached facades.

This module provides:
- Product: the record facade (ONIX 2.1 and 3.0 layouts)
- Subitem models: ProductIdentifier, Contributor, SupplyDetail, ...
- FieldResolver: logical field -> generation-specific element path
- ProductSettings / load_settings: cardinality rules and version threshold

Usage:
    from onixkit.product import Product, IdentifierType

    product = Product.from_xml(xml_text, version="3.0")
    isbn = product.identifier(IdentifierType.ISBN_13)
    names = [c.name for c in product.contributors()]
"""

from onixkit.product.codes import (
    IdentifierType,
    MeasureType,
    SalesRightsType,
    SubjectScheme,
    TextConcept,
)
from onixkit.product.exceptions import NotFoundError, OnixError, StructuralError
from onixkit.product.fields import FIELDS, UNIMPLEMENTED_FOR_ONIX3, FieldResolver
from onixkit.product.models import (
    Audience,
    AudienceRange,
    Contributor,
    CoverImage,
    Language,
    Measure,
    Measures,
    MeasureValue,
    MediaFile,
    OtherText,
    Price,
    Prize,
    ProductFormFeature,
    ProductIdentifier,
    Publisher,
    RangePrecision,
    ReviewQuote,
    SalesRights,
    Series,
    SeriesInfo,
    Subject,
    SupplyDetail,
    TextBlock,
    Title,
)
from onixkit.product.product import Product, strip_namespaces
from onixkit.product.settings import CardinalityRule, ProductSettings, load_settings

__all__ = [
    # Facade
    "Product",
    "strip_namespaces",
    # Errors
    "OnixError",
    "StructuralError",
    "NotFoundError",
    # Resolution
    "FieldResolver",
    "FIELDS",
    "UNIMPLEMENTED_FOR_ONIX3",
    # Settings
    "ProductSettings",
    "CardinalityRule",
    "load_settings",
    # Code lists
    "IdentifierType",
    "MeasureType",
    "SalesRightsType",
    "SubjectScheme",
    "TextConcept",
    # Subitems
    "Audience",
    "AudienceRange",
    "Contributor",
    "Language",
    "Measure",
    "MediaFile",
    "OtherText",
    "Price",
    "Prize",
    "ProductFormFeature",
    "ProductIdentifier",
    "Publisher",
    "SalesRights",
    "Series",
    "Subject",
    "SupplyDetail",
    "Title",
    # Derived facts
    "CoverImage",
    "Measures",
    "MeasureValue",
    "RangePrecision",
    "ReviewQuote",
    "SeriesInfo",
    "TextBlock",
]
