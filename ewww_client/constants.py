"""Constants for the EWWW cloud optimizer protocol."""

# Endpoints (relative to the configured base URL)
DEFAULT_BASE_URL = "https://optimize.exactlywww.com"
CONVERT_ENDPOINT = "/v2/"
VERIFY_ENDPOINT = "/verify/"
QUOTA_ENDPOINT = "/quota/"

# Credentials
MIN_KEY_LENGTH = 20
EXPECTED_KEY_LENGTH = 32

# The backend marks image payloads with this media type only
IMAGE_CONTENT_TYPE = "application/octet-stream"

# Multipart flag values
WEBP_ENABLED = "1"
WEBP_DISABLED = "0"
METADATA_KEEP = "1"
METADATA_STRIP = "0"

# Keep-alive pings optimize a plain jpeg at low quality
KEEP_ALIVE_QUALITY = 60

# Timeouts in seconds
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_CONVERSION_TIMEOUT = 120.0

DEFAULT_USER_AGENT = "ewww-cloud-client"
# /verify/ and /quota/ answer 403 to non-browser user agents
BROWSER_USER_AGENT = (
    "Mozilla/4.0 (compatible; MSIE 6.0; Windows NT 5.1; SV1; "
    ".NET CLR 1.0.3705; .NET CLR 1.1.4322)"
)

# Key status values reported by /verify/
STATUS_GREAT = "great"
STATUS_EXCEEDED = "exceeded"
STATUS_INVALID = "invalid"
