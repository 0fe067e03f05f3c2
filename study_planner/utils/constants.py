"""Route, header and message values shared by the endpoint and its client."""

# Path of the single plan generation route.
PLAN_ROUTE = "/functions/v1/generate-study-plan"

MISSING_FIELDS_MESSAGE = "Missing required fields: subjects and examDate"

# Sent on every endpoint response, including the preflight.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# Form bounds for hours of study per day.
MIN_HOURS_PER_DAY = 1
MAX_HOURS_PER_DAY = 12
