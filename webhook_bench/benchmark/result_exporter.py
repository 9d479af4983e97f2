"""Handles exporting benchmark results to CSV."""
import logging
import re
from pathlib import Path
from typing import Dict, List, Sequence, Union

import pandas as pd

from .models import BenchmarkData, BenchmarkGroup


# Configure logging
logger = logging.getLogger(__name__)

COLUMNS = ["group", "unit", "name", "value", "total_requests", "successful_responses"]


class ResultExporter:
    """Handles exporting benchmark results to CSV."""

    @staticmethod
    def group_to_frame(group: BenchmarkGroup) -> pd.DataFrame:
        rows = [
            {
                "group": group.name,
                "unit": group.unit,
                "name": row.name,
                "value": row.value,
                "total_requests": row.total_requests,
                "successful_responses": row.successful_responses,
            }
            for row in group.data
        ]
        return pd.DataFrame(rows, columns=COLUMNS)

    @staticmethod
    def file_name_for(group: BenchmarkGroup) -> str:
        """Turn a group name like 'API Throughput(More is better)' into 'api_throughput_more_is_better.csv'."""
        slug = re.sub(r"[^a-z0-9]+", "_", group.name.lower()).strip("_")
        return f"{slug}.csv"

    @staticmethod
    def save_group(group: BenchmarkGroup, output_path: Union[Path, str]) -> None:
        """
        Save one group's results to CSV.

        Args:
            group: Benchmark group with results.
            output_path: Path to save CSV.
        """
        df = ResultExporter.group_to_frame(group)
        df.to_csv(output_path, index=False)
        logger.info(f"CSV saved: {output_path}")

    @staticmethod
    def load_group(input_path: Union[Path, str]) -> BenchmarkGroup:
        """
        Load a group's results from CSV without running the benchmark.

        Args:
            input_path: Path to load CSV from.

        Returns:
            BenchmarkGroup rebuilt from the file. Missing values load as NaN.
        """
        df = pd.read_csv(input_path)
        if df.empty:
            raise ValueError(f"No benchmark rows in {input_path}")

        data = [
            BenchmarkData(
                name=str(row["name"]),
                value=float(row["value"]),
                total_requests=int(row["total_requests"]),
                successful_responses=int(row["successful_responses"]),
            )
            for _, row in df.iterrows()
        ]
        group = BenchmarkGroup(name=str(df["group"].iloc[0]), unit=str(df["unit"].iloc[0]), data=data)
        logger.info(f"Results loaded from CSV: {input_path}")
        return group

    @staticmethod
    def save_groups(groups: Sequence[BenchmarkGroup], output_dir: Union[Path, str]) -> Dict[str, Path]:
        """
        Save every group that has results into its own CSV file.

        Returns:
            Mapping of group name to the written file path.
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        written: Dict[str, Path] = {}
        for group in groups:
            if not group.data:
                logger.warning(f"No results available for {group.name}, skipping export")
                continue
            path = output_dir / ResultExporter.file_name_for(group)
            ResultExporter.save_group(group, path)
            written[group.name] = path
        return written

    @staticmethod
    def format_table(group: BenchmarkGroup) -> List[str]:
        """Render a group as plain text lines for log output."""
        lines = [group.name, f"{'Platform':<16}{'Value (' + group.unit + ')':>16}{'Total Requests':>18}{'Successful':>14}"]
        for row in group.data:
            lines.append(f"{row.name:<16}{row.value:>16.0f}{row.total_requests:>18}{row.successful_responses:>14}")
        return lines
