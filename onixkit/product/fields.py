"""Version-aware field resolution.

ONIX 3.0 moved most product-level elements into composites
(DescriptiveDetail, PublishingDetail, CollateralDetail, ProductSupply).
`FIELDS` records, for every logical field, where it lives in each
generation. An empty onix3 tuple means no 3.0 mapping is implemented and the
accessor answers None/empty for 3.0 records.
"""

import re
from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .codes import LEGACY_TEXT_TYPES, ONIX3_TEXT_TYPES
from .settings import DEFAULT_VERSION_THRESHOLD

LEGACY = "legacy"
ONIX3 = "onix3"


class FieldLocation(BaseModel):
    """Candidate paths (tried in order) for one logical field."""

    model_config = ConfigDict(frozen=True)

    legacy: Tuple[str, ...] = Field(default_factory=tuple, description="ONIX 2.1 paths")
    onix3: Tuple[str, ...] = Field(default_factory=tuple, description="ONIX 3.0 paths")
    variant: Optional[str] = Field(None, description="Subitem variant built from each match")


def _loc(legacy, onix3=(), variant=None) -> FieldLocation:
    if isinstance(legacy, str):
        legacy = (legacy,)
    if isinstance(onix3, str):
        onix3 = (onix3,)
    return FieldLocation(legacy=legacy, onix3=onix3, variant=variant)


FIELDS: Dict[str, FieldLocation] = {
    'identifiers': _loc('ProductIdentifier', 'ProductIdentifier', 'ProductIdentifier'),
    'publishing_status': _loc('PublishingStatus', 'PublishingDetail/PublishingStatus'),
    'product_form': _loc('ProductForm', 'DescriptiveDetail/ProductForm'),
    'product_form_detail': _loc('ProductFormDetail', 'DescriptiveDetail/ProductFormDetail'),
    'product_form_features': _loc(
        'ProductFormFeature', 'DescriptiveDetail/ProductFormFeature', 'ProductFormFeature'),
    'epub_technical_protection': _loc(
        'EpubTechnicalProtection', 'DescriptiveDetail/EpubTechnicalProtection'),
    'languages': _loc('Language', 'DescriptiveDetail/Language', 'Language'),
    'language_of_text': _loc('Language', variant='Language'),
    'audience_codes': _loc('AudienceCode'),
    'audiences': _loc('Audience', variant='Audience'),
    'audience_ranges': _loc('AudienceRange', variant='AudienceRange'),
    'media_files': _loc('MediaFile', variant='MediaFile'),
    'measures': _loc('Measure', variant='Measure'),
    'titles': _loc('Title', 'DescriptiveDetail/TitleDetail', 'Title'),
    'no_series': _loc('NoSeries'),
    'series': _loc('Series', variant='Series'),
    'number_of_pages': _loc('NumberOfPages'),
    'publishers': _loc('Publisher', 'PublishingDetail/Publisher', 'Publisher'),
    'contributors': _loc('Contributor', 'DescriptiveDetail/Contributor', 'Contributor'),
    'supply_details': _loc('SupplyDetail', 'ProductSupply/SupplyDetail', 'SupplyDetail'),
    'sales_rights': _loc('SalesRights', 'PublishingDetail/SalesRights', 'SalesRights'),
    'texts': _loc('OtherText', 'CollateralDetail/TextContent', 'OtherText'),
    'prizes': _loc('Prize', 'CollateralDetail/Prize', 'Prize'),
    'subjects': _loc('Subject', 'DescriptiveDetail/Subject', 'Subject'),
    # 3.0 has no flat main-subject element; the main flag on Subject is used
    'main_subject_bisac': _loc('BASICMainSubject'),
    'edition_type': _loc('EditionTypeCode', 'DescriptiveDetail/EditionType'),
    'publication_date': _loc('PublicationDate', 'PublishingDetail/PublishingDate/Date'),
    'imprint_name': _loc('Imprint/ImprintName', 'PublishingDetail/Imprint/ImprintName'),
    'publisher_name': _loc('Publisher/PublisherName', 'PublishingDetail/Publisher/PublisherName'),
    'copyright_year': _loc(
        ('CopyrightYear', 'CopyrightStatement/CopyrightYear'),
        'PublishingDetail/CopyrightStatement/CopyrightYear'),
    'copyright_owner': _loc(
        ('CopyrightStatement/CopyrightOwner/CorporateName',
         'CopyrightStatement/CopyrightOwner/PersonName'),
        ('PublishingDetail/CopyrightStatement/CopyrightOwner/CorporateName',
         'PublishingDetail/CopyrightStatement/CopyrightOwner/PersonName')),
}

UNIMPLEMENTED_FOR_ONIX3: FrozenSet[str] = frozenset(
    name for name, location in FIELDS.items() if not location.onix3
)

_VERSION_PART_RE = re.compile(r"\d+")


def parse_version(version: Optional[str]) -> Tuple[int, ...]:
    """Turn a dotted version ("2.1", "3.0.8") into a comparable tuple.

    Anything without digits parses to (), which sorts below every threshold.
    """
    if not version:
        return ()
    return tuple(int(part) for part in _VERSION_PART_RE.findall(str(version)))


def version_at_least(version: Optional[str], threshold: str) -> bool:
    """Compare dotted versions numerically; missing parts count as 0."""
    left, right = parse_version(version), parse_version(threshold)
    if not left:
        return False
    width = max(len(left), len(right))
    left += (0,) * (width - len(left))
    right += (0,) * (width - len(right))
    return left >= right


class FieldResolver:
    """Chooses the generation-specific paths for a record's version."""

    def __init__(self, version: Optional[str], threshold: str = DEFAULT_VERSION_THRESHOLD):
        self.version = version
        self.threshold = threshold
        self.is_onix3 = version_at_least(version, threshold)

    @property
    def generation(self) -> str:
        return ONIX3 if self.is_onix3 else LEGACY

    def location(self, field: str) -> FieldLocation:
        """Raises KeyError for names missing from FIELDS."""
        return FIELDS[field]

    def paths(self, field: str) -> Tuple[str, ...]:
        location = self.location(field)
        return location.onix3 if self.is_onix3 else location.legacy

    def path(self, field: str) -> Optional[str]:
        """First candidate path, or None when the field has no mapping."""
        paths = self.paths(field)
        return paths[0] if paths else None

    def is_implemented(self, field: str) -> bool:
        return bool(self.paths(field))

    def text_type_code(self, concept: str) -> Optional[str]:
        table = ONIX3_TEXT_TYPES if self.is_onix3 else LEGACY_TEXT_TYPES
        return table.get(concept)
