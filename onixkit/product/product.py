"""The Product facade: one ONIX <Product> record, typed and queryable.

A Product wraps an already-parsed <Product> element that uses reference tag
names, plus the ONIX version of the message it came from. Accessors resolve
their element paths through FieldResolver, so the same call works for ONIX
2.1 and ONIX 3.0 records. Fields with no known 3.0 mapping (see
`fields.UNIMPLEMENTED_FOR_ONIX3`) answer None or an empty tuple for 3.0.

Usage:
    from onixkit.product import Product

    product = Product.from_xml(xml_bytes, version="2.1")
    product.identifier(IdentifierType.ISBN_13)
    product.main_description()
    product.for_sale_rights()
"""

import copy
from typing import Any, Dict, List, Optional, Tuple, Union

from lxml import etree

from .cache import CachedItem, SubitemCache
from .cardinality import check_cardinality
from .codes import (
    AudienceCodeType,
    LanguageRole,
    MeasureType,
    PublishingStatus,
    SubjectScheme,
    TextConcept,
    TitleType,
    UNKNOWN_LABEL,
)
from .exceptions import NotFoundError
from .fields import FIELDS, FieldResolver
from .models import (
    AudienceRange,
    Contributor,
    CoverImage,
    Language,
    MeasureValue,
    Measures,
    OtherText,
    Prize,
    ProductFormFeature,
    ProductIdentifier,
    Publisher,
    ReviewQuote,
    SalesRights,
    SeriesInfo,
    Subject,
    SupplyDetail,
    TextBlock,
    Title,
)
from .settings import DEFAULT_SETTINGS, ProductSettings
from .text import text_content

_MEASURE_SLOTS = {
    MeasureType.HEIGHT: 'height',
    MeasureType.WIDTH: 'width',
    MeasureType.THICKNESS: 'thickness',
    MeasureType.WEIGHT: 'weight',
}


def strip_namespaces(root: etree._Element) -> etree._Element:
    """Drop namespace URIs from every element tag, in place."""
    for element in root.iter():
        # comments and processing instructions have non-string tags
        if isinstance(element.tag, str):
            element.tag = etree.QName(element).localname
    etree.cleanup_namespaces(root)
    return root


class Product:
    """Read-only facade over one <Product> element.

    Construction checks the configured cardinality rules and raises
    StructuralError when one is broken. Subitems are materialized lazily,
    once per path, and cached for the life of the Product. Aggregate
    accessors are recomputed on each call from the cached subitems.
    """

    def __init__(self, root: Union[etree._Element, etree._ElementTree], version: str,
                 settings: Optional[ProductSettings] = None):
        """
        Args:
            root: The <Product> element (or a tree whose root it is)
            version: ONIX version of the enclosing message, e.g. "2.1", "3.0"
            settings: Cardinality rules, version threshold and log level

        Raises:
            StructuralError: if a cardinality rule is violated
        """
        if isinstance(root, etree._ElementTree):
            root = root.getroot()

        self._settings = settings or DEFAULT_SETTINGS
        self._version = version
        self._root = root
        self._fields = FieldResolver(version, self._settings.version_threshold)

        check_cardinality(root, self._settings.cardinality, self._settings.log_level)

        self._cache = SubitemCache(root, log_level=self._settings.log_level)

    @classmethod
    def from_xml(cls, xml: Union[str, bytes], version: str,
                 settings: Optional[ProductSettings] = None) -> "Product":
        """Parse a serialized <Product> and wrap it.

        Namespaces are stripped so that ONIX 3.0 reference-tag documents in
        the ONIX namespace resolve like un-namespaced ones.
        """
        encoding = None
        if isinstance(xml, str):
            # already decoded: the declared encoding no longer describes the bytes
            xml = xml.encode('utf-8')
            encoding = 'utf-8'
        parser = etree.XMLParser(encoding=encoding, resolve_entities=False, no_network=True,
                                 remove_comments=True)
        root = etree.fromstring(xml, parser=parser)
        return cls(strip_namespaces(root), version, settings=settings)

    def __repr__(self) -> str:
        return f"<Product version={self._version!r} generation={self._fields.generation!r}>"

    # Raw access

    @property
    def version(self) -> str:
        return self._version

    @property
    def is_onix3(self) -> bool:
        return self._fields.is_onix3

    @property
    def fields(self) -> FieldResolver:
        return self._fields

    def get(self, path: str, variant: Optional[str] = None) -> Tuple[CachedItem, ...]:
        """All matches of `path` below <Product>, as subitems or raw element copies.

        Results are cached per (path, variant), so a raw read of a path never
        changes what the typed accessors return for it.
        """
        return self._cache.get(path, variant)

    def element(self) -> etree._Element:
        """A detached copy of the whole <Product> subtree."""
        return copy.deepcopy(self._root)

    def preload(self) -> None:
        """Materialize every mapped field now, e.g. before sharing across threads."""
        for name, location in FIELDS.items():
            for path in self._fields.paths(name):
                self._cache.get(path, location.variant)

    def _items(self, field: str) -> Tuple[Any, ...]:
        path = self._fields.path(field)
        if path is None:
            return ()
        return self.get(path, self._fields.location(field).variant)

    def _text(self, field: str) -> Optional[str]:
        """Text of the first non-empty match among the field's candidate paths."""
        for path in self._fields.paths(field):
            items = self.get(path)
            if items:
                value = text_content(items[0])
                if value:
                    return value
        return None

    # Identifiers and titles

    def identifiers(self) -> Tuple[ProductIdentifier, ...]:
        return self._items('identifiers')

    def identifier(self, id_type: str) -> str:
        """Value of the first identifier of `id_type` (List 5).

        Raises:
            NotFoundError: if no identifier has that type
        """
        for identifier in self.identifiers():
            if identifier.id_type == id_type:
                return identifier.value
        raise NotFoundError(f"no identifier of type {id_type} found", name=id_type)

    def titles(self) -> Tuple[Title, ...]:
        return self._items('titles')

    def title(self) -> Optional[str]:
        """Display form of the distinctive title, else of the first title."""
        titles = self.titles()
        for title in titles:
            if title.title_type == TitleType.DISTINCTIVE_TITLE:
                return title.display
        return titles[0].display if titles else None

    # Status and form

    def publishing_status(self) -> Optional[str]:
        return self._text('publishing_status')

    def publishing_status_label(self) -> Optional[str]:
        status = self.publishing_status()
        if status is None:
            return None
        return PublishingStatus.LABELS.get(status, UNKNOWN_LABEL)

    def is_active(self) -> bool:
        """True for Active (04) and Forthcoming (02) products."""
        return self.publishing_status() in PublishingStatus.ACTIVE_STATUSES

    def product_form(self) -> Optional[str]:
        return self._text('product_form')

    def product_form_detail(self) -> Optional[str]:
        return self._text('product_form_detail')

    def product_form_features(self) -> Tuple[ProductFormFeature, ...]:
        return self._items('product_form_features')

    def epub_technical_protection(self) -> Optional[str]:
        return self._text('epub_technical_protection')

    def edition_type(self) -> Optional[str]:
        return self._text('edition_type')

    def number_of_pages(self) -> Optional[str]:
        return self._text('number_of_pages')

    # Language and audience

    def languages(self) -> Tuple[Language, ...]:
        return self._items('languages')

    def language_of_text(self) -> Optional[str]:
        for language in self._items('language_of_text'):
            if language.role == LanguageRole.LANGUAGE_OF_TEXT:
                return language.code
        return None

    def audience_codes(self) -> Tuple[str, ...]:
        """<AudienceCode> values, else <Audience> entries of ONIX type 01."""
        if not self._fields.is_implemented('audience_codes'):
            return ()
        codes = tuple(text_content(code) for code in self._items('audience_codes'))
        if codes:
            return codes
        return tuple(
            audience.value for audience in self._items('audiences')
            if audience.code_type == AudienceCodeType.ONIX_AUDIENCE_CODE
        )

    def audience_ranges(self) -> Tuple[AudienceRange, ...]:
        return self._items('audience_ranges')

    # Physical description

    def cover_image(self) -> Optional[CoverImage]:
        """URL and date of the first front-cover JPEG linked by URL.

        Earlier media files of other kinds are skipped, unlike readers that
        only inspect the first <MediaFile> and answer None when it is not a
        front cover.
        """
        for media_file in self._items('media_files'):
            if media_file.url:
                return CoverImage(url=media_file.url, date=media_file.formatted_date)
        return None

    def measures(self) -> Optional[Measures]:
        """Height/width/thickness/weight, None when no <Measure> exists."""
        measure_items = self._items('measures')
        if not measure_items:
            return None
        slots: Dict[str, MeasureValue] = {}
        for measure in measure_items:
            slot = _MEASURE_SLOTS.get(measure.measure_type)
            if slot:
                slots[slot] = MeasureValue(value=measure.value, unit=measure.unit)
        return Measures(**slots)

    # Series

    def is_not_part_of_series(self) -> Optional[bool]:
        """True when <NoSeries/> is present; None where unmapped."""
        if not self._fields.is_implemented('no_series'):
            return None
        return bool(self._items('no_series'))

    def series(self) -> Optional[SeriesInfo]:
        if self.is_not_part_of_series() is not False:
            return None
        series = self._items('series')
        if not series:
            return None
        return SeriesInfo(
            title_of_series=series[0].title_of_series,
            number_within_series=series[0].number_within_series,
        )

    # Publishing

    def publishers(self) -> Tuple[Publisher, ...]:
        return self._items('publishers')

    def first_publisher_name(self) -> Optional[str]:
        return self._text('publisher_name')

    def first_imprint_name(self) -> Optional[str]:
        return self._text('imprint_name')

    def publication_date(self) -> Optional[str]:
        return self._text('publication_date')

    def copyright_year(self) -> Optional[str]:
        return self._text('copyright_year')

    def copyright_statement(self) -> Optional[str]:
        """Year and owner joined by a space; corporate owner preferred over person name."""
        parts = [p for p in (self.copyright_year(), self._text('copyright_owner')) if p]
        return " ".join(parts) if parts else None

    def contributors(self) -> Tuple[Contributor, ...]:
        return self._items('contributors')

    # Supply and rights

    def supply_details(self) -> Tuple[SupplyDetail, ...]:
        return self._items('supply_details')

    def sales_rights(self) -> Tuple[SalesRights, ...]:
        return self._items('sales_rights')

    def for_sale_rights(self) -> str:
        """Territories the product is for sale in.

        A single <SalesRights> is returned as is, whatever its type. With
        several, the for-sale entries are merged into one sorted,
        space-separated list; duplicates are kept.
        """
        rights = self.sales_rights()
        if len(rights) == 1:
            return rights[0].value

        territories: List[str] = []
        for entry in rights:
            if entry.is_for_sale:
                territories.extend(entry.value.split())
        return " ".join(sorted(territories))

    # Descriptive text

    def texts(self) -> Tuple[OtherText, ...]:
        return self._items('texts')

    def _text_block(self, concept: str) -> Optional[TextBlock]:
        code = self._fields.text_type_code(concept)
        for text in self.texts():
            if text.text_type == code:
                return TextBlock(text=text.text, format=text.text_format)
        return None

    def main_description(self, strict: bool = False) -> Optional[TextBlock]:
        """Main description, else the first text block unless `strict`."""
        description = self._text_block(TextConcept.MAIN_DESCRIPTION)
        if description is not None or strict:
            return description
        texts = self.texts()
        if not texts:
            return None
        return TextBlock(text=texts[0].text, format=texts[0].text_format)

    def review_quotes(self) -> Tuple[ReviewQuote, ...]:
        code = self._fields.text_type_code(TextConcept.REVIEW_QUOTE)
        return tuple(
            ReviewQuote(text=t.text, format=t.text_format, author=t.author, source_title=t.source_title)
            for t in self.texts() if t.text_type == code
        )

    def promotional_headline(self) -> Optional[TextBlock]:
        return self._text_block(TextConcept.PROMOTIONAL_HEADLINE)

    def biographical_note(self) -> Optional[TextBlock]:
        return self._text_block(TextConcept.BIOGRAPHICAL_NOTE)

    def back_cover_copy(self) -> Optional[TextBlock]:
        return self._text_block(TextConcept.BACK_COVER_COPY)

    def excerpt(self) -> Optional[TextBlock]:
        return self._text_block(TextConcept.EXCERPT)

    # Prizes

    def prizes(self) -> Tuple[Prize, ...]:
        return self._items('prizes')

    def prizes_minimal_data(self) -> List[Dict[str, Optional[str]]]:
        return [prize.minimal_data() for prize in self.prizes()]

    def prizes_data(self) -> List[Dict[str, Any]]:
        return [prize.data() for prize in self.prizes()]

    # Subjects

    def subjects(self) -> Tuple[Subject, ...]:
        return self._items('subjects')

    def _bisac_subjects(self) -> List[Subject]:
        return [s for s in self.subjects() if s.scheme == SubjectScheme.BISAC_SUBJECT_HEADING]

    def main_subject_bisac(self) -> Optional[str]:
        """Main BISAC code: <BASICMainSubject> in 2.1, else the first main-flagged BISAC subject."""
        legacy_main = self._text('main_subject_bisac')
        if legacy_main:
            return legacy_main
        for subject in self._bisac_subjects():
            if subject.is_main:
                return subject.code
        return None

    def other_subject_bisacs(self) -> List[str]:
        return [s.code for s in self._bisac_subjects() if not s.is_main and s.code]

    def keywords(self) -> str:
        for subject in self.subjects():
            if subject.scheme == SubjectScheme.KEYWORDS:
                return subject.heading_text or ""
        return ""
