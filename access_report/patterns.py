"""Access Report - Constants and patterns"""

VERSION = "1.0.0"

# Apache common/combined layout, referrer and user agent optional
ACCESS_LOG_PATTERN = (
    r'^(?P<ip>\S+) \S+ \S+ \[(?P<timestamp>[^\]]+)\] '
    r'"(?P<method>[A-Za-z]+) (?P<path>\S+) (?P<protocol>[^"\s]+)" '
    r'(?P<status>\d{3})(?: (?P<size>\S+))?'
    r'(?: "(?P<referrer>[^"]*)" "(?P<user_agent>[^"]*)")?\s*$'
)

TIMESTAMP_PATTERN = (
    r'\[(?P<day>[^/\]\s]+)/(?P<month>[^/\]\s]+)/(?P<year>[^:\]\s]+):'
    r'(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})'
    r'(?:\s+(?P<zone>[^\]\s]+))?\]'
)

STATUS_PATTERN = r'^\d{3}$'
FAILURE_STATUS_PATTERN = r'^[45]\d\d$'

# A line counts as log-like when it starts with a dotted quad
IPV4_SHAPE_PATTERN = r'^\d+\.\d+\.\d+\.\d+'

# Positional fields (0-based) of the whitespace-split fallback
METHOD_FIELD = 5
STATUS_FIELD = 8

TRACKED_METHODS = ('GET', 'POST')
TOP_FAILURE_DAYS = 5

REPORT_TITLE = "Log Analysis Report"
SECTION_TITLES = (
    "Request Counts",
    "Unique IP Addresses",
    "Failure Requests (4xx/5xx)",
    "Top User",
    "Daily Request Averages",
    "Days with Highest Failures",
    "Requests by Hour",
    "Request Trends",
    "Status Codes Breakdown",
    "Most Active User by Method",
    "Patterns in Failure Requests",
)

NO_FAILURES_MESSAGE = "No failed requests (4xx/5xx) found in the log file."
NO_TRENDS_MESSAGE = "No significant trends detected."
COMPLETION_MESSAGE = "Analysis complete!"
NO_ADDRESS = "None"
