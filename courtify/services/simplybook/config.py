from __future__ import annotations

JSONRPC_VERSION = "2.0"

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": "Courtify/0.1",
}

# Remote method names on the SimplyBook user API
METHOD_GET_TOKEN = "getToken"
METHOD_GET_EVENT_LIST = "getEventList"
METHOD_GET_UNIT_LIST = "getUnitList"
METHOD_GET_START_TIME_MATRIX = "getStartTimeMatrix"

# Slot-matrix queries always ask for single-unit bookings.
DEFAULT_SLOT_COUNT = 1

# Services without a duration in the catalog are one-hour bookings.
DEFAULT_SERVICE_DURATION = 60
