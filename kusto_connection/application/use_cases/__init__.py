"""Application use cases."""

from .describe_connection import ConnectionDescription, DescribeConnection

__all__ = ["ConnectionDescription", "DescribeConnection"]
