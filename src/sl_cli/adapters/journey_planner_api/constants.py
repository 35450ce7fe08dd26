"""Constants for the SL Journey Planner v2 adapter.

API Documentation: https://www.trafiklab.se/api/our-apis/sl/journey-planner-2/

No authentication required.
"""

JOURNEY_PLANNER_BASE_URL = "https://journeyplanner.integration.sl.se/v2"
STOP_FINDER_PATH = "/stop-finder"  # GET /stop-finder?name_sf=...
TRIPS_PATH = "/trips"  # GET /trips?type_origin=...&name_origin=...

# Stop-finder: any object type, filtered to stops, streets, addresses and POIs
STOP_FINDER_TYPE = "any"
STOP_FINDER_OBJECT_FILTER = "46"

# Coordinate reference system suffix expected by the planner
COORDINATE_FORMAT = "{lon}:{lat}:WGS84[dd.ddddd]"

# Zone of offset-less timestamps and of the itd_date/itd_time request parameters
SL_SOURCE_TIMEZONE = "Europe/Stockholm"
