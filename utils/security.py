"""
Security Module - Client IP lookup and contact form rate limiting
"""

import threading
import time
from flask import request


def get_client_ip():
    """Get real client IP address

    X-Forwarded-For is only honoured through ProxyFix, which the app installs
    when TRUST_PROXY_COUNT is set; otherwise the socket peer is used.
    """
    return request.remote_addr or 'unknown'


class RateLimiter:
    """Sliding-window request counter keyed by client and endpoint"""

    def __init__(self, max_requests=5, window=60, clock=time.monotonic):
        self.max_requests = max_requests
        self.window = window
        self._clock = clock
        self._requests = {}  # {(ip, endpoint): [timestamp, ...]}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def _sweep(self, now):
        """Drop keys with no requests left inside the window"""
        stale = [key for key, stamps in self._requests.items()
                 if not stamps or now - stamps[-1] >= self.window]
        for key in stale:
            del self._requests[key]
        self._last_sweep = now

    def allow(self, client_ip, endpoint='contact'):
        """Record a request and return False if the limit is exceeded"""
        key = (client_ip, endpoint)
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)

            # Clean old requests outside the window
            recent = [ts for ts in self._requests.get(key, []) if now - ts < self.window]
            if len(recent) >= self.max_requests:
                self._requests[key] = recent
                return False
            recent.append(now)
            self._requests[key] = recent
            return True

    def reset(self):
        with self._lock:
            self._requests.clear()

    def __len__(self):
        with self._lock:
            return len(self._requests)


def check_rate_limit(limiter, endpoint='contact'):
    """Check if the current request's IP is within rate limit"""
    return limiter.allow(get_client_ip(), endpoint)


__all__ = ['get_client_ip', 'RateLimiter', 'check_rate_limit']
