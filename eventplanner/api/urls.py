"""URL prefixes for the versioned API."""

BASE = "/v1"
AUTH = BASE + "/auth"
USERS = BASE + "/users"
EVENTS = BASE + "/events"
