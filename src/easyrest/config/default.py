# easyrest/config/default.py

# Fixed for the whole request/response cycle, in seconds.
DEFAULT_TIMEOUT = 5.0

DEFAULT_LOG_LEVEL = "WARNING"

REQUEST_ID = 1

URL_PREFIX = "http://"

# Non-standard scheme token kept for wire compatibility with existing servers.
BASIC_AUTH_TOKEN = "Basic: "

MAX_REDIRECTS = 10
