"""
Monitoring Token Hashing

HMAC tokens for the health endpoint's token authorizer.
"""
import hashlib
import hmac
from typing import Optional

from django.conf import settings


class HashService:
    """HMAC-SHA256 keyed with an additional secret and ``SECRET_KEY``."""

    def __init__(self, secret_key: Optional[str] = None):
        self.secret_key = secret_key if secret_key is not None else settings.SECRET_KEY

    def hmac(self, message: str, additional_secret: str) -> str:
        key = f"{additional_secret}{self.secret_key}".encode()
        return hmac.new(key, message.encode(), hashlib.sha256).hexdigest()

    def validate_hmac(self, message: str, additional_secret: str, token: str) -> bool:
        # Header values arrive latin-1 decoded and may hold any character
        expected = self.hmac(message, additional_secret)
        return hmac.compare_digest(expected.encode(), token.encode('utf-8', 'surrogatepass'))
