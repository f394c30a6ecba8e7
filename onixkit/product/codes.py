"""ONIX code list values used by the product facade.

Grouped by code list, in the manner of a schema contract: every literal
code the facade compares against lives here.
"""


class IdentifierType:
    """List 5: product identifier type."""

    PROPRIETARY = "01"
    ISBN_10 = "02"
    GTIN_13 = "03"
    UPC = "04"
    ISMN_10 = "05"
    DOI = "06"
    LCCN = "13"
    GTIN_14 = "14"
    ISBN_13 = "15"


class TitleType:
    """List 15: title type."""

    DISTINCTIVE_TITLE = "01"


class LanguageRole:
    """List 22: language role."""

    LANGUAGE_OF_TEXT = "01"


class AudienceCodeType:
    """List 29: audience code type."""

    ONIX_AUDIENCE_CODE = "01"


class AudienceRangeQualifier:
    """List 30: audience range qualifier."""

    US_SCHOOL_GRADE_RANGE = "11"
    INTEREST_AGE_MONTHS = "16"
    INTEREST_AGE_YEARS = "17"


class AudienceRangePrecision:
    """List 31: audience range precision."""

    EXACT = "01"
    FROM = "03"
    TO = "04"


class ContributorRole:
    """List 17: contributor role (subset)."""

    AUTHOR = "A01"
    NARRATOR = "E03"
    READ_BY = "E07"
    PERFORMER = "E99"


class MediaFileType:
    """List 38: image/audio/video file type."""

    FRONT_COVER = "04"


class MediaFileFormat:
    """List 39: image/audio/video file format."""

    JPEG = "03"


class MediaFileLinkType:
    """List 40: image/audio/video file link type."""

    URL = "01"


class MeasureType:
    """List 48: measure type."""

    HEIGHT = "01"
    WIDTH = "02"
    THICKNESS = "03"
    WEIGHT = "08"


class MeasureUnit:
    """List 50: measure unit."""

    CENTIMETERS = "cm"
    GRAMS = "gr"
    INCHES = "in"
    KILOGRAMS = "kg"
    POUNDS = "lb"
    MILLIMETERS = "mm"
    OUNCES = "oz"


class SalesRightsType:
    """List 46: sales rights type."""

    FOR_SALE_EXCLUSIVE = "01"
    FOR_SALE_NON_EXCLUSIVE = "02"
    NOT_FOR_SALE = "03"
    FOR_SALE_EXCLUSIVE_RESTRICTED = "07"
    FOR_SALE_NON_EXCLUSIVE_RESTRICTED = "08"

    FOR_SALE = frozenset({
        FOR_SALE_EXCLUSIVE,
        FOR_SALE_NON_EXCLUSIVE,
        FOR_SALE_EXCLUSIVE_RESTRICTED,
        FOR_SALE_NON_EXCLUSIVE_RESTRICTED,
    })


class SubjectScheme:
    """List 26: main subject scheme identifier (subset)."""

    BISAC_SUBJECT_HEADING = "10"
    KEYWORDS = "20"


class PriceType:
    """List 58: price type (subset)."""

    RRP_EXCLUDING_TAX = "01"
    RRP_INCLUDING_TAX = "02"


class PublishingStatus:
    """List 64: publishing status."""

    FORTHCOMING = "02"
    ACTIVE = "04"

    ACTIVE_STATUSES = frozenset({ACTIVE, FORTHCOMING})

    LABELS = {
        "00": "Unspecified",
        "01": "Cancelled",
        "02": "Forthcoming",
        "03": "Postponed indefinitely",
        "04": "Active",
        "05": "No longer our product",
        "06": "Out of stock indefinitely",
        "07": "Out of print",
        "08": "Inactive",
        "09": "Unknown",
        "10": "Remaindered",
        "11": "Withdrawn from sale",
        "12": "Not available in this market",
        "13": "Active, but not sold separately",
        "14": "Active, with market restrictions",
        "15": "Recalled",
        "16": "Temporarily withdrawn from sale",
    }


class AvailabilityCode:
    """List 54: availability status (legacy two-letter codes)."""

    CANCELLED = "AB"
    CONTACT_SUPPLIER = "CS"
    AVAILABLE = "IP"
    NOT_YET_PUBLISHED = "NP"
    OUT_OF_STOCK_INDEFINITELY = "OI"
    OUT_OF_PRINT = "OP"
    REPLACED_BY_NEW_EDITION = "OR"
    POSTPONED_INDEFINITELY = "PP"

    LABELS = {
        "IP": "Available",
        "NP": "Not yet available",
        "OP": "Terminated",
        "OR": "Replaced",
        "AB": "Cancelled",
        "CS": "Contact supplier",
    }


class ProductAvailability:
    """List 65: product availability (two-digit codes)."""

    LABELS = {
        "20": "Available",
        "10": "Not yet available",
        "11": "Awaiting stock",
        "21": "In stock",
        "40": "Not available",
        "41": "Replaced",
        "43": "No longer supplied",
        "51": "Terminated",
        "01": "Cancelled",
        "99": "Contact supplier",
    }


UNKNOWN_LABEL = "Unknown"


class TextConcept:
    """Logical kinds of descriptive text, independent of generation."""

    MAIN_DESCRIPTION = "main_description"
    SHORT_DESCRIPTION = "short_description"
    REVIEW_QUOTE = "review_quote"
    PROMOTIONAL_HEADLINE = "promotional_headline"
    BIOGRAPHICAL_NOTE = "biographical_note"
    BACK_COVER_COPY = "back_cover_copy"
    EXCERPT = "excerpt"


# List 33 (ONIX 2.1 OtherText) and List 153 (ONIX 3.0 TextContent) disagree
# on the numbering, so each generation has its own table.
LEGACY_TEXT_TYPES = {
    TextConcept.MAIN_DESCRIPTION: "01",
    TextConcept.SHORT_DESCRIPTION: "02",
    TextConcept.REVIEW_QUOTE: "08",
    TextConcept.PROMOTIONAL_HEADLINE: "09",
    TextConcept.BIOGRAPHICAL_NOTE: "13",
    TextConcept.BACK_COVER_COPY: "18",
    TextConcept.EXCERPT: "23",
}

ONIX3_TEXT_TYPES = {
    TextConcept.MAIN_DESCRIPTION: "03",
    TextConcept.SHORT_DESCRIPTION: "02",
    TextConcept.REVIEW_QUOTE: "06",
    TextConcept.PROMOTIONAL_HEADLINE: "10",
    TextConcept.BIOGRAPHICAL_NOTE: "12",
    TextConcept.BACK_COVER_COPY: "05",
    TextConcept.EXCERPT: "14",
}
