"""
Rate limiting configuration using slowapi.

Two tiers:
  • booking – 10/min (POST /api/book – keeps the ledger from being flooded)
  • default – 60/min (everything else)

The limiter keys on client IP by default.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address, default_limits=["60/minute"])

# Named rate strings for use in @limiter.limit() decorators
BOOKING = "10/minute"   # booking creation
DEFAULT = "60/minute"   # general API
