from slowapi import Limiter
from slowapi.util import get_remote_address

from itemrequest.core.config import settings

# Shared limiter; anonymous endpoints (request submission, login) are throttled per client address.
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
