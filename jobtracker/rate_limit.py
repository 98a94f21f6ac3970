"""
JobTracker - Centralized rate limiting configuration.

All rate limit decorators should import `limiter` from this module.
The limiter keys on client IP address.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# --- Rate limit constants ---

# AI analysis (costs money per completion call) - strictest
RATE_LIMIT_AI = "5/minute"

# Job write operations (create, update, delete) - moderate
RATE_LIMIT_GENERAL = "30/minute"

# Read-heavy endpoints (list, get, stats) - generous (1/sec sustained)
RATE_LIMIT_READ = "60/minute"
