"""Constants for the Custom Search JSON API."""

from ..const import SEARCH_BASE_URL

SEARCH_ENDPOINT = SEARCH_BASE_URL

DEFAULT_START_INDEX = 1

# Coded boolean values used by ``filter`` and ``c2coff``
FLAG_ON = "1"
FLAG_OFF = "0"

# Delimiters inside the ``sort`` expression
SORT_SEPARATOR = ":"
SORT_RESTRICT_TOKEN = "r"  # noqa: S105
SORT_DATE_FORMAT = "%Y%m%d"

RULE_DATE_RESTRICT = "date_restrict_type and date_restrict_number go together"
RULE_SITE_SEARCH_FILTER = "site_search_filter requires site_search"
RULE_RANGE_ORDER = "low_range must not exceed high_range"
RULE_IMAGE_OPTIONS = "image options require search_type image"
