"""
Global slowapi rate limiter.

Imported by the routers for per-endpoint limits. Mounted onto app.state in
main.py so slowapi can find it.

Storage: Redis when REDIS_URL is set, in-memory otherwise. Off until
create_app switches it on from Settings.env_name; development apps are
never throttled.
"""
import os

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=os.getenv("REDIS_URL", "memory://"),
    enabled=False,
)
