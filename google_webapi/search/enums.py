"""Enumerations for Custom Search requests. Member values are the wire tokens."""

from __future__ import annotations

from enum import StrEnum


class SafetyLevel(StrEnum):
    """SafeSearch filtering level."""

    OFF = "off"
    MEDIUM = "medium"
    HIGH = "high"


class SearchType(StrEnum):
    """Result type; web results need no parameter."""

    WEB = "web"
    IMAGE = "image"


class SiteSearchFilter(StrEnum):
    """Whether ``siteSearch`` includes or excludes the named site."""

    EXCLUDE = "e"
    INCLUDE = "i"


class DateRestrictType(StrEnum):
    """Unit of the ``dateRestrict`` window."""

    DAYS = "d"
    WEEKS = "w"
    MONTHS = "m"
    YEARS = "y"


class RightsType(StrEnum):
    """Licensing filters; combinable."""

    PUBLIC_DOMAIN = "cc_publicdomain"
    ATTRIBUTE = "cc_attribute"
    SHARE_ALIKE = "cc_sharealike"
    NON_COMMERCIAL = "cc_noncommercial"
    NON_DERIVED = "cc_nonderived"


class FileType(StrEnum):
    """File extensions indexable by Google; combinable."""

    ADOBE_PDF = "pdf"
    ADOBE_POSTSCRIPT = "ps"
    AUTODESK_DWF = "dwf"
    GOOGLE_EARTH_KML = "kml"
    GOOGLE_EARTH_KMZ = "kmz"
    MICROSOFT_EXCEL = "xls"
    MICROSOFT_EXCEL_XML = "xlsx"
    MICROSOFT_POWERPOINT = "ppt"
    MICROSOFT_POWERPOINT_XML = "pptx"
    MICROSOFT_WORD = "doc"
    MICROSOFT_WORD_XML = "docx"
    OPEN_DOCUMENT_PRESENTATION = "odp"
    OPEN_DOCUMENT_SPREADSHEET = "ods"
    OPEN_DOCUMENT_TEXT = "odt"
    RICH_TEXT_FORMAT = "rtf"
    SHOCKWAVE_FLASH = "swf"
    TEXT = "txt"
    WIRELESS_MARKUP_LANGUAGE = "wml"


class SortOrder(StrEnum):
    """Direction of a ``sort`` expression."""

    ASCENDING = "a"
    DESCENDING = "d"


class SortBias(StrEnum):
    """Strength of a biased ``sort`` expression."""

    STRONG = "s"
    WEAK = "w"


class ImageSize(StrEnum):
    """``imgSize`` values."""

    ICON = "icon"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"
    XXLARGE = "xxlarge"
    HUGE = "huge"


class ImageType(StrEnum):
    """``imgType`` values."""

    CLIPART = "clipart"
    FACE = "face"
    LINEART = "lineart"
    STOCK = "stock"
    PHOTO = "photo"
    ANIMATED = "animated"


class ImageColorType(StrEnum):
    """``imgColorType`` values."""

    COLOR = "color"
    GRAY = "gray"
    MONO = "mono"
    TRANS = "trans"


class ImageDominantColor(StrEnum):
    """``imgDominantColor`` values."""

    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    GRAY = "gray"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    TEAL = "teal"
    WHITE = "white"
    YELLOW = "yellow"
