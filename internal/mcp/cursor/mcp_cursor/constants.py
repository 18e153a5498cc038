"""Cursor API constants."""

API_PREFIX = "/v0"

# /repositories is limited to 1 request/user/minute and 30/user/hour
REPOSITORIES_CACHE_TTL_SECONDS = 300.0

LIST_REPOSITORIES_DEFAULT_LIMIT = 20
LIST_REPOSITORIES_MAX_LIMIT = 100
