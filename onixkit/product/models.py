"""Data models for ONIX product subitems and derived facts.

Every subitem is a frozen value object built once from its source element.
Nothing here keeps a reference to the XML tree, so a Product embedding
thousands of subitems only holds strings.
"""

import re
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .codes import (
    AudienceRangePrecision,
    AvailabilityCode,
    MediaFileFormat,
    MediaFileLinkType,
    MediaFileType,
    ProductAvailability,
    SalesRightsType,
    UNKNOWN_LABEL,
)

_INVERTED_NAME_RE = re.compile(r"^(.+), (.+)$")
_DATE_PREFIX_RE = re.compile(r"^\s*(\d{4})-?(\d{2})-?(\d{2})")


class Subitem(BaseModel):
    """Base class for all subitem value objects."""

    model_config = ConfigDict(frozen=True, extra='forbid')


class ProductIdentifier(Subitem):
    """A <ProductIdentifier> (ISBN, GTIN, proprietary id...)."""

    id_type: str = Field(..., description="ProductIDType (List 5)")
    value: str = Field(..., description="IDValue")
    id_type_name: Optional[str] = Field(None, description="IDTypeName for proprietary identifiers")


class Title(Subitem):
    """A <Title> (2.1) or <TitleDetail> (3.0)."""

    title_type: Optional[str] = Field(None, description="TitleType (List 15)")
    text: Optional[str] = Field(None, description="TitleText")
    prefix: Optional[str] = Field(None, description="TitlePrefix")
    without_prefix: Optional[str] = Field(None, description="TitleWithoutPrefix")
    subtitle: Optional[str] = Field(None, description="Subtitle")

    @property
    def display(self) -> Optional[str]:
        """Full title: TitleText, or prefix + remainder, plus ': subtitle'."""
        main = self.text
        if not main and self.without_prefix:
            main = " ".join(p for p in (self.prefix, self.without_prefix) if p)
        if not main:
            return self.subtitle
        if self.subtitle:
            return f"{main}: {self.subtitle}"
        return main


class Language(Subitem):
    role: Optional[str] = Field(None, description="LanguageRole (List 22)")
    code: Optional[str] = Field(None, description="LanguageCode (ISO 639-2/B)")
    country: Optional[str] = Field(None, description="CountryCode")


class Audience(Subitem):
    code_type: Optional[str] = Field(None, description="AudienceCodeType (List 29)")
    value: Optional[str] = Field(None, description="AudienceCodeValue")


class RangePrecision(str, Enum):
    """Mapped AudienceRangePrecision codes (List 31)."""
    EXACT = "exact"
    FROM = "from"
    TO = "to"


_PRECISIONS = {
    AudienceRangePrecision.EXACT: RangePrecision.EXACT,
    AudienceRangePrecision.FROM: RangePrecision.FROM,
    AudienceRangePrecision.TO: RangePrecision.TO,
}


class AudienceRange(Subitem):
    """An <AudienceRange>: qualifier plus parallel precision/value lists."""

    qualifier: Optional[str] = Field(None, description="AudienceRangeQualifier (List 30)")
    precision_codes: Tuple[str, ...] = Field(default_factory=tuple, description="Raw AudienceRangePrecision codes")
    values: Tuple[str, ...] = Field(default_factory=tuple, description="AudienceRangeValue entries")

    @property
    def precisions(self) -> Tuple[RangePrecision, ...]:
        """Precision codes mapped to exact/from/to; unknown codes are dropped."""
        return tuple(_PRECISIONS[code] for code in self.precision_codes if code in _PRECISIONS)


class Contributor(Subitem):
    """A <Contributor>. The role is mandatory, every name form is optional."""

    role: str = Field(..., description="ContributorRole (List 17)")
    sequence_number: Optional[str] = Field(None, description="SequenceNumber")
    person_name: Optional[str] = Field(None, description="PersonName (direct order)")
    person_name_inverted: Optional[str] = Field(None, description="PersonNameInverted ('Last, First')")
    names_before_key: Optional[str] = Field(None, description="NamesBeforeKey")
    key_names: Optional[str] = Field(None, description="KeyNames")
    corporate_name: Optional[str] = Field(None, description="CorporateName")
    biographical_note: Optional[str] = Field(None, description="BiographicalNote, CDATA markers removed")

    @property
    def name(self) -> Optional[str]:
        """Person name in direct order.

        PersonName wins; otherwise PersonNameInverted is turned from
        "Last, First" into "First Last". A value without ", " is returned
        as is.
        """
        if self.person_name:
            return self.person_name
        if self.person_name_inverted:
            return _INVERTED_NAME_RE.sub(r"\2 \1", self.person_name_inverted)
        return None


class Measure(Subitem):
    measure_type: Optional[str] = Field(None, description="MeasureTypeCode (List 48)")
    value: Optional[str] = Field(None, description="Measurement")
    unit: Optional[str] = Field(None, description="MeasureUnitCode (List 50)")


def format_media_date(raw: Optional[str]) -> Optional[str]:
    """Render an ONIX date ("20120315", "2012-03-15T10:00") as YYYY-MM-DD."""
    if not raw:
        return None
    match = _DATE_PREFIX_RE.match(raw)
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


class MediaFile(Subitem):
    """A <MediaFile>. Only front-cover JPEG URLs are exposed as url/date."""

    media_type: Optional[str] = Field(None, description="MediaFileTypeCode (List 38)")
    format: Optional[str] = Field(None, description="MediaFileFormatCode (List 39)")
    link_type: Optional[str] = Field(None, description="MediaFileLinkTypeCode (List 40)")
    link: Optional[str] = Field(None, description="MediaFileLink")
    date: Optional[str] = Field(None, description="MediaFileDate, raw")

    @property
    def is_front_cover_url(self) -> bool:
        return (
            self.media_type == MediaFileType.FRONT_COVER
            and self.format == MediaFileFormat.JPEG
            and self.link_type == MediaFileLinkType.URL
        )

    @property
    def url(self) -> Optional[str]:
        return self.link if self.is_front_cover_url else None

    @property
    def formatted_date(self) -> Optional[str]:
        return format_media_date(self.date) if self.is_front_cover_url else None


class Series(Subitem):
    title_of_series: Optional[str] = Field(None, description="TitleOfSeries, CDATA markers removed")
    number_within_series: Optional[str] = Field(None, description="NumberWithinSeries")


class Price(Subitem):
    """One <Price> inside a <SupplyDetail>; any part may be missing."""

    price_type: Optional[str] = Field(None, description="PriceTypeCode / PriceType (List 58)")
    amount: Optional[str] = Field(None, description="PriceAmount")
    currency: Optional[str] = Field(None, description="CurrencyCode")
    effective_from: Optional[str] = Field(None, description="PriceEffectiveFrom")


class SupplyDetail(Subitem):
    availability_code: Optional[str] = Field(None, description="AvailabilityCode (List 54)")
    product_availability: Optional[str] = Field(None, description="ProductAvailability (List 65)")
    on_sale_date: Optional[str] = Field(None, description="OnSaleDate, else SupplyDate/Date")
    warehouse_location_name: Optional[str] = Field(None, description="Stock/LocationName")
    prices: Tuple[Price, ...] = Field(default_factory=tuple)

    @property
    def availability(self) -> Optional[str]:
        """Availability label; ProductAvailability takes precedence over AvailabilityCode."""
        if self.product_availability:
            return ProductAvailability.LABELS.get(self.product_availability, UNKNOWN_LABEL)
        if self.availability_code:
            return AvailabilityCode.LABELS.get(self.availability_code, UNKNOWN_LABEL)
        return None


class SalesRights(Subitem):
    rights_type: Optional[str] = Field(None, description="SalesRightsType (List 46)")
    countries: Tuple[str, ...] = Field(default_factory=tuple, description="RightsCountry / CountriesIncluded")
    regions: Tuple[str, ...] = Field(default_factory=tuple, description="RightsTerritory / RegionsIncluded")

    @property
    def value(self) -> str:
        """Countries then regions, space separated, as found in the record."""
        return " ".join(v.strip() for v in self.countries + self.regions if v.strip())

    @property
    def is_for_sale(self) -> bool:
        return self.rights_type in SalesRightsType.FOR_SALE


class OtherText(Subitem):
    """An <OtherText> (2.1) or <TextContent> (3.0) block."""

    text_type: Optional[str] = Field(None, description="TextTypeCode (List 33) / TextType (List 153)")
    text_format: Optional[str] = Field(None, description="TextFormat element or textformat attribute")
    text: Optional[str] = Field(None, description="Text, CDATA markers removed")
    author: Optional[str] = Field(None, description="TextAuthor")
    source_title: Optional[str] = Field(None, description="TextSourceTitle / SourceTitle")


class Subject(Subitem):
    scheme: Optional[str] = Field(None, description="SubjectSchemeIdentifier (List 27)")
    scheme_name: Optional[str] = Field(None, description="SubjectSchemeName")
    code: Optional[str] = Field(None, description="SubjectCode")
    heading_text: Optional[str] = Field(None, description="SubjectHeadingText")
    is_main: bool = Field(False, description="True when a <MainSubject/> flag is present")


class Prize(Subitem):
    name: Optional[str] = Field(None, description="PrizeName")
    year: Optional[str] = Field(None, description="PrizeYear")
    country: Optional[str] = Field(None, description="PrizeCountry")
    code: Optional[str] = Field(None, description="PrizeCode (List 41)")
    jury: Optional[str] = Field(None, description="PrizeJury")
    statement: Optional[str] = Field(None, description="PrizeStatement, CDATA markers removed")

    def minimal_data(self) -> Dict[str, Optional[str]]:
        return {"name": self.name, "year": self.year}

    def data(self) -> Dict[str, Any]:
        return self.model_dump()


class Publisher(Subitem):
    role: Optional[str] = Field(None, description="PublishingRole (List 45)")
    name: Optional[str] = Field(None, description="PublisherName")
    website: Optional[str] = Field(None, description="Website/WebsiteLink")


class ProductFormFeature(Subitem):
    feature_type: Optional[str] = Field(None, description="ProductFormFeatureType (List 79)")
    value: Optional[str] = Field(None, description="ProductFormFeatureValue")
    description: Optional[str] = Field(None, description="ProductFormFeatureDescription")


# Derived facts returned by Product aggregate accessors

class TextBlock(BaseModel):
    text: Optional[str] = Field(None, description="Text body")
    format: Optional[str] = Field(None, description="Text format code")


class ReviewQuote(TextBlock):
    author: Optional[str] = Field(None, description="Quoted reviewer")
    source_title: Optional[str] = Field(None, description="Publication the quote comes from")


class MeasureValue(BaseModel):
    value: Optional[str] = None
    unit: Optional[str] = None


class Measures(BaseModel):
    """Physical dimensions with one slot per known measure type."""

    height: Optional[MeasureValue] = None
    width: Optional[MeasureValue] = None
    thickness: Optional[MeasureValue] = None
    weight: Optional[MeasureValue] = None


class CoverImage(BaseModel):
    url: str
    date: Optional[str] = Field(None, description="YYYY-MM-DD")


class SeriesInfo(BaseModel):
    title_of_series: Optional[str] = None
    number_within_series: Optional[str] = None
