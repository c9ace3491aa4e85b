"""Pingdom API access: HTTP transport and typed check operations."""

from pingsync.api.client import PingdomApi
from pingsync.api.protocol import ChecksApiProtocol, PingdomApiProtocol, TmsChecksApiProtocol
from pingsync.api.transport import PingdomTransport

__all__ = [
    "ChecksApiProtocol",
    "PingdomApi",
    "PingdomApiProtocol",
    "PingdomTransport",
    "TmsChecksApiProtocol",
]
