"""Constants for the SL Transport v1 adapter.

API Documentation: https://www.trafiklab.se/api/our-apis/sl/transport/

No authentication required.
"""

TRANSPORT_BASE_URL = "https://transport.integration.sl.se/v1"
SITES_PATH = "/sites"  # GET /sites?expand=true
DEPARTURES_PATH = "/sites/{site_id}/departures"  # GET /sites/:id/departures

# Departures list handling
MAX_DEPARTURES = 30
STALE_AFTER_MINUTES = -1  # Departures further in the past than this are dropped
DELAY_THRESHOLD_SECONDS = 60

# Departure states that mean the vehicle will not run as planned
CANCELLED_STATES = frozenset({"CANCELLED", "REPLACED"})

# Departure timestamps carry no offset and are Stockholm wall-clock time
SL_SOURCE_TIMEZONE = "Europe/Stockholm"
