"""
Aggregation Constants
Chua cac constants cua aggregation engine: gioi han doc file, URL schemes,
HTTP header va dinh dang document.
"""

from config.paths import APP_NAME, APP_VERSION

# Gioi han doc 1 file (10 MiB). File lon hon -> loi inline, khong dem token
MAX_FILE_BYTES = 10 * 1024 * 1024

# Target bat dau bang mot trong cac prefix nay duoc xu ly nhu URL
URL_SCHEMES = ("http://", "https://")

# Header dinh danh gui kem moi HTTP GET
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# Separator dung trong structure listing va exclusion matching
PATH_SEPARATOR = "/"

# === Document format ===
STRUCTURE_HEADER = "[ STRUCTURE ]"
URL_LISTING_PREFIX = "URL: "
FILE_HEADER_TEMPLATE = "[ {path} ]"
URL_HEADER_TEMPLATE = "[ URL: {url} ]"
FRAGMENT_TERMINATOR = "\n\n"
READ_ERROR_TEMPLATE = "Error reading file: {error}"
FETCH_ERROR_TEMPLATE = "Error fetching URL: {error}"
