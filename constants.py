# Constants used across the application

# Linear priority levels
# 0 = No priority (sorted after every real priority)
# 1 = Urgent
# 2 = High
# 3 = Normal
# 4 = Low
NO_PRIORITY = 0

# Cycle status labels relative to the active cycle of an issue's team
CYCLE_STATUS_CURRENT = "current"
CYCLE_STATUS_PAST = "past"
CYCLE_STATUS_FUTURE = "future"

# Linear workflow state types that are never shown on the display
CLOSED_STATE_TYPES = ["completed", "canceled"]

# Nodes requested per GraphQL connection; only the first page is read
PAGE_SIZE = 50

LINEAR_GRAPHQL_URL = "https://api.linear.app/graphql"

# Response envelopes understood by the display client
RESPONSE_SHAPE_ROOT = "root"
RESPONSE_SHAPE_MERGE_VARIABLES = "merge_variables"
RESPONSE_SHAPES = (RESPONSE_SHAPE_ROOT, RESPONSE_SHAPE_MERGE_VARIABLES)

# Seconds intermediaries may treat a snapshot as fresh (15 minutes)
DEFAULT_CACHE_MAX_AGE = 900

# Worker threads used to fetch per-team cycles concurrently
DEFAULT_MAX_WORKERS = 4
