"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import DescribeRequest, DescriptorResponse, HealthResponse, KeywordResponse

__all__ = [
    "DescribeRequest",
    "DescriptorResponse",
    "HealthResponse",
    "KeywordResponse",
    "create_app",
]
