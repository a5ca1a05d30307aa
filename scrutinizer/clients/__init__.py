"""Scrutinizer SDK resource clients."""

from scrutinizer.clients.reports import ReportsClient
from scrutinizer.clients.repos import ReposClient

__all__ = [
    "ReposClient",
    "ReportsClient",
]
