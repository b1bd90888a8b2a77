"""
Rate limiting configuration using slowapi.

Only the admin login is limited (10/min) to slow down password guessing.
The limiter keys on client IP.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Named rate strings for use in @limiter.limit() decorators
AUTH = "10/minute"       # admin login
