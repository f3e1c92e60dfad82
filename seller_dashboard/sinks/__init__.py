"""Output sinks for exporting dashboard reports."""

from seller_dashboard.sinks.console import ConsoleSink
from seller_dashboard.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
