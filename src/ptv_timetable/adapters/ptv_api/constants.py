"""Constants for the PTV timetable API adapter.

API Documentation: https://www.ptv.vic.gov.au/footer/data-and-reporting/datasets/ptv-timetable-api/

Every request carries a devid parameter and an HMAC-SHA1 signature.
"""

PTV_BASE_URL = "http://timetableapi.ptv.vic.gov.au"
VERSIONED_ROOT = "/v2"

DEFAULT_TIMEOUT_SECONDS = 10.0

# Query parameter names
DEVID_PARAM = "devid"
SIGNATURE_PARAM = "signature"

# Endpoint path templates, relative to VERSIONED_ROOT
HEALTHCHECK_PATH = "/healthcheck"
NEARME_PATH = "/nearme/latitude/{latitude}/longitude/{longitude}"
POI_PATH = (
    "/poi/{poi}/lat1/{lat1}/long1/{long1}/lat2/{lat2}/long2/{long2}"
    "/griddepth/{griddepth}/limit/{limit}"
)
SEARCH_PATH = "/search/{query}"
BROAD_DEPARTURES_PATH = "/mode/{mode}/stop/{stop}/departures/by-destination/limit/{limit}"
SPECIFIC_DEPARTURES_PATH = (
    "/mode/{mode}/line/{line}/stop/{stop}/directionid/{direction_id}/departures/all/limit/{limit}"
)
STOPPING_PATTERN_PATH = "/mode/{mode}/run/{run}/stop/{stop}/stopping-pattern"
STOPS_FOR_LINE_PATH = "/mode/{mode}/line/{line}/stops-for-line"
LINES_BY_MODE_PATH = "/lines/mode/{mode}"
STOP_FACILITIES_PATH = "/stops"
DISRUPTIONS_PATH = "/disruptions/modes/{modes}"

# Reserved characters kept as-is in free-text path segments
PATH_SAFE_CHARACTERS = ";,/:@&=+$!*'()~"
