from .._version import __version__

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"
CONTENT_TYPE_TEXT_PLAIN = "text/plain"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"

# Environment variables
ENV_TIMEOUT = "FLUENTHTTP_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "FLUENTHTTP_FOLLOW_REDIRECTS"
ENV_PROXY = "FLUENTHTTP_PROXY"
ENV_MAX_WORKERS = "FLUENTHTTP_MAX_WORKERS"

DEFAULT_USER_AGENT = f"fluenthttp/{__version__}"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_WORKERS = 10

NO_HEADER_TEMPLATE = "No Header with key {key}"
