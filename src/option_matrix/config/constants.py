from datetime import time

# Candidate risk-free rates used to build price bands
DEFAULT_RISK_FREE_RATES = (-0.0062, -0.0030, 0.0000, 0.10, 0.30)

DEFAULT_TREE_STEPS = 100

# Regular session, US Eastern wall clock
MARKET_OPEN = time(9, 30)
MARKET_CLOSE = time(16, 0)

DAYS_PER_YEAR = 365.25
TIME_AXIS_POINTS = 13
PRICE_AXIS_PADDING_STEPS = 5
TIME_WALK_LIMIT = 1000

EASTERN_TZ = "America/New_York"
DEFAULT_EXCHANGE_CALENDAR = "XNYS"

DEBIT = "Debit"
CREDIT = "Credit"
