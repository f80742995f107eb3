"""
core/parallel - boto3 client 구성

Example:
    from core.parallel import get_client

    cloudwatch = get_client(session, "cloudwatch", timeout=5)
"""

from .client import DEFAULT_TIMEOUT, get_client

__all__ = ["DEFAULT_TIMEOUT", "get_client"]
