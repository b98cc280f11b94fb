"""Google Geocoding API constants.

API docs: https://developers.google.com/maps/documentation/geocoding/requests-reverse-geocoding
"""

GEOCODE_API = "https://maps.googleapis.com/maps/api/geocode/json"

# Restrict results to the place levels we can display, most specific first
RESULT_TYPES = ["locality", "administrative_area_level_1", "country"]

GEOCODE_FAILURE = "Failed to fetch location data"
GEOCODE_FAILURE_MESSAGE = "We're having trouble determining your location name."
