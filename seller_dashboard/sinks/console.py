"""Console sink for reading reports in a terminal."""

import json
from typing import Any

from seller_dashboard.sinks.serialization import to_dict


class ConsoleSink:
    """Output reports to console (stdout)."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, report_type: str, records: list[Any]) -> None:
        """Write a batch of records to console."""
        print(f"\n{'='*60}")
        print(f"Report: {report_type} ({len(records)} records)")
        print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                print(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[report_type] = self._counts.get(report_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Sink Summary")
        print("=" * 60)
        for report_type, count in self._counts.items():
            print(f"  {report_type}: {count} records")
