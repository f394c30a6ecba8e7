"""Subitem builders: one XML element in, one frozen subitem model out.

Each `extract_*` function reads a fixed set of children. Optional children
come back as None; a missing mandatory child raises NotFoundError, which the
SubitemCache turns into "skip this one item".

`SUBITEM_BUILDERS` is the closed registry from variant name to builder.
"""

from typing import Callable, Dict, Optional

from lxml import etree

from .models import (
    Audience,
    AudienceRange,
    Contributor,
    Language,
    Measure,
    MediaFile,
    OtherText,
    Price,
    Prize,
    ProductFormFeature,
    ProductIdentifier,
    Publisher,
    SalesRights,
    Series,
    Subitem,
    Subject,
    SupplyDetail,
    Title,
)
from .text import (
    all_child_texts,
    child_text,
    clean_literal_data,
    has_child,
    inner_markup,
    single_child_text,
    text_content,
)

SubitemBuilder = Callable[[etree._Element], Subitem]


def extract_product_identifier(element: etree._Element) -> ProductIdentifier:
    return ProductIdentifier(
        id_type=single_child_text(element, 'ProductIDType'),
        value=single_child_text(element, 'IDValue'),
        id_type_name=child_text(element, 'IDTypeName'),
    )


def extract_title(element: etree._Element) -> Title:
    """Build a Title from <Title> (2.1) or <TitleDetail> (3.0).

    In 3.0 the text parts live in a nested <TitleElement>; the first one is
    used.
    """
    title_element = element.find('TitleElement')
    source = title_element if title_element is not None else element
    return Title(
        title_type=child_text(element, 'TitleType'),
        text=child_text(source, 'TitleText'),
        prefix=child_text(source, 'TitlePrefix'),
        without_prefix=child_text(source, 'TitleWithoutPrefix'),
        subtitle=child_text(source, 'Subtitle'),
    )


def extract_language(element: etree._Element) -> Language:
    return Language(
        role=child_text(element, 'LanguageRole'),
        code=child_text(element, 'LanguageCode'),
        country=child_text(element, 'CountryCode'),
    )


def extract_audience(element: etree._Element) -> Audience:
    return Audience(
        code_type=child_text(element, 'AudienceCodeType'),
        value=child_text(element, 'AudienceCodeValue'),
    )


def extract_audience_range(element: etree._Element) -> AudienceRange:
    return AudienceRange(
        qualifier=child_text(element, 'AudienceRangeQualifier'),
        precision_codes=all_child_texts(element, 'AudienceRangePrecision'),
        values=all_child_texts(element, 'AudienceRangeValue'),
    )


def extract_contributor(element: etree._Element) -> Contributor:
    """Build a Contributor; raises NotFoundError without a <ContributorRole>."""
    return Contributor(
        role=single_child_text(element, 'ContributorRole'),
        sequence_number=child_text(element, 'SequenceNumber'),
        person_name=child_text(element, 'PersonName'),
        person_name_inverted=child_text(element, 'PersonNameInverted'),
        names_before_key=child_text(element, 'NamesBeforeKey'),
        key_names=child_text(element, 'KeyNames'),
        corporate_name=child_text(element, 'CorporateName'),
        biographical_note=clean_literal_data(child_text(element, 'BiographicalNote')),
    )


def extract_measure(element: etree._Element) -> Measure:
    return Measure(
        measure_type=child_text(element, 'MeasureTypeCode') or child_text(element, 'MeasureType'),
        value=child_text(element, 'Measurement'),
        unit=child_text(element, 'MeasureUnitCode'),
    )


def extract_media_file(element: etree._Element) -> MediaFile:
    return MediaFile(
        media_type=child_text(element, 'MediaFileTypeCode'),
        format=child_text(element, 'MediaFileFormatCode'),
        link_type=child_text(element, 'MediaFileLinkTypeCode'),
        link=child_text(element, 'MediaFileLink'),
        date=child_text(element, 'MediaFileDate'),
    )


def extract_series(element: etree._Element) -> Series:
    return Series(
        title_of_series=clean_literal_data(child_text(element, 'TitleOfSeries')),
        number_within_series=child_text(element, 'NumberWithinSeries'),
    )


def _descendant_text(element: etree._Element, name: str) -> Optional[str]:
    # Price parts are matched anywhere below <Price> (e.g. inside <PriceDate>)
    found = element.find(f'.//{name}')
    return text_content(found) if found is not None else None


def extract_price(element: etree._Element) -> Price:
    return Price(
        price_type=_descendant_text(element, 'PriceTypeCode') or _descendant_text(element, 'PriceType'),
        amount=_descendant_text(element, 'PriceAmount'),
        currency=_descendant_text(element, 'CurrencyCode'),
        effective_from=_descendant_text(element, 'PriceEffectiveFrom'),
    )


def extract_supply_detail(element: etree._Element) -> SupplyDetail:
    on_sale_date = child_text(element, 'OnSaleDate')
    if not on_sale_date:
        on_sale_date = child_text(element, 'SupplyDate/Date')

    return SupplyDetail(
        availability_code=child_text(element, 'AvailabilityCode'),
        product_availability=child_text(element, 'ProductAvailability'),
        on_sale_date=on_sale_date,
        warehouse_location_name=child_text(element, 'Stock/LocationName'),
        prices=tuple(extract_price(price) for price in element.findall('Price')),
    )


def extract_sales_rights(element: etree._Element) -> SalesRights:
    """Build SalesRights from the 2.1 flat layout or the 3.0 <Territory>."""
    countries = all_child_texts(element, 'RightsCountry') + all_child_texts(element, 'Territory/CountriesIncluded')
    regions = all_child_texts(element, 'RightsTerritory') + all_child_texts(element, 'Territory/RegionsIncluded')
    return SalesRights(
        rights_type=child_text(element, 'SalesRightsType'),
        countries=countries,
        regions=regions,
    )


def extract_other_text(element: etree._Element) -> OtherText:
    """Build an OtherText from <OtherText> (2.1) or <TextContent> (3.0).

    XHTML content is kept as markup; plain content is taken as text.
    """
    text_type = child_text(element, 'TextTypeCode') or child_text(element, 'TextType')

    text = None
    text_format = child_text(element, 'TextFormat')
    text_element = element.find('Text')
    if text_element is not None:
        text_format = text_format or text_element.get('textformat')
        if len(text_element):
            text = inner_markup(text_element)
        else:
            text = text_content(text_element)

    return OtherText(
        text_type=text_type,
        text_format=text_format,
        text=clean_literal_data(text),
        author=child_text(element, 'TextAuthor'),
        source_title=child_text(element, 'TextSourceTitle') or child_text(element, 'SourceTitle'),
    )


def extract_subject(element: etree._Element) -> Subject:
    return Subject(
        scheme=child_text(element, 'SubjectSchemeIdentifier'),
        scheme_name=child_text(element, 'SubjectSchemeName'),
        code=child_text(element, 'SubjectCode'),
        heading_text=child_text(element, 'SubjectHeadingText'),
        is_main=has_child(element, 'MainSubject'),
    )


def extract_prize(element: etree._Element) -> Prize:
    return Prize(
        name=child_text(element, 'PrizeName'),
        year=child_text(element, 'PrizeYear'),
        country=child_text(element, 'PrizeCountry'),
        code=child_text(element, 'PrizeCode'),
        jury=child_text(element, 'PrizeJury'),
        statement=clean_literal_data(child_text(element, 'PrizeStatement')),
    )


def extract_publisher(element: etree._Element) -> Publisher:
    return Publisher(
        role=child_text(element, 'PublishingRole'),
        name=child_text(element, 'PublisherName'),
        website=child_text(element, 'Website/WebsiteLink'),
    )


def extract_product_form_feature(element: etree._Element) -> ProductFormFeature:
    return ProductFormFeature(
        feature_type=child_text(element, 'ProductFormFeatureType'),
        value=child_text(element, 'ProductFormFeatureValue'),
        description=child_text(element, 'ProductFormFeatureDescription'),
    )


SUBITEM_BUILDERS: Dict[str, SubitemBuilder] = {
    'ProductIdentifier': extract_product_identifier,
    'Title': extract_title,
    'Language': extract_language,
    'Audience': extract_audience,
    'AudienceRange': extract_audience_range,
    'Contributor': extract_contributor,
    'Measure': extract_measure,
    'MediaFile': extract_media_file,
    'Series': extract_series,
    'SupplyDetail': extract_supply_detail,
    'SalesRights': extract_sales_rights,
    'OtherText': extract_other_text,
    'Subject': extract_subject,
    'Prize': extract_prize,
    'Publisher': extract_publisher,
    'ProductFormFeature': extract_product_form_feature,
}


def builder_for(variant: str) -> Optional[SubitemBuilder]:
    """Registered builder for `variant`, or None for raw-element fallback."""
    return SUBITEM_BUILDERS.get(variant)
