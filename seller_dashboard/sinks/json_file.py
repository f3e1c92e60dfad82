"""JSON file sink for exporting reports."""

import json
import logging
from pathlib import Path
from typing import Any

from seller_dashboard.exceptions import SinkError
from seller_dashboard.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output reports to JSON files, one file per report type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SinkError(f"Cannot create output directory {self.output_dir}: {e}") from e
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, report_type: str, records: list[Any]) -> None:
        """Write a batch of records to ``<report_type>.json``, replacing earlier output."""
        file_path = self.output_dir / f"{report_type}.json"

        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as e:
            raise SinkError(f"Failed to write {file_path}: {e}") from e

        self._counts[report_type] = len(records)
        logger.debug("Wrote %d records to %s", len(records), file_path)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for report_type, count in self._counts.items():
            print(f"  {report_type}: {count} records")
