"""Endpoints and wire constants for the SCP: Secret Laboratory API."""

API_BASE_URL = "https://api.scpslgame.com"
DEFAULT_SERVER_INFO_URL = f"{API_BASE_URL}/serverinfo.php"
DEFAULT_IP_URL = f"{API_BASE_URL}/ip.php"

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "scpsl-api/0.1.0"

# Largest value an account id may take (unsigned 64-bit)
MAX_ACCOUNT_ID = 2**64 - 1

LAST_ONLINE_FORMAT = "%Y-%m-%d"
PLAYERS_COUNT_SEPARATOR = "/"
