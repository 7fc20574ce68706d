"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. The search limit string comes from
settings (SEARCH_RATE_LIMIT) and is read per request.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from bizdirectory.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _search_limit() -> str:
    return get_settings().search_rate_limit


limit_search = limiter.limit(_search_limit)
