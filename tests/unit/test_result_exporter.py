"""Unit tests for CSV export of benchmark results."""

import math

import pandas as pd
import pytest

from webhook_bench.benchmark import BenchmarkData, BenchmarkGroup, ResultExporter


@pytest.fixture
def latency_group():
    return BenchmarkGroup(
        name="Hello World API Latency(Less is better)",
        unit="ms",
        data=[
            BenchmarkData("Albato", 120.0, 10, 10),
            BenchmarkData("LateNode", float("nan"), 10, 7),
        ],
    )


class TestResultExporter:
    """Test saving and loading group results."""

    def test_file_name(self, latency_group):
        assert ResultExporter.file_name_for(latency_group) == "hello_world_api_latency_less_is_better.csv"

    def test_save_group_columns(self, latency_group, tmp_path):
        path = tmp_path / "latency.csv"
        ResultExporter.save_group(latency_group, path)

        df = pd.read_csv(path)
        assert list(df.columns) == ["group", "unit", "name", "value", "total_requests", "successful_responses"]
        assert df["name"].tolist() == ["Albato", "LateNode"]
        assert df["total_requests"].tolist() == [10, 10]

    def test_load_group(self, latency_group, tmp_path):
        path = tmp_path / "latency.csv"
        ResultExporter.save_group(latency_group, path)

        loaded = ResultExporter.load_group(path)

        assert loaded.name == latency_group.name
        assert loaded.unit == "ms"
        assert loaded.data[0] == BenchmarkData("Albato", 120.0, 10, 10)
        assert math.isnan(loaded.data[1].value)
        assert loaded.data[1].successful_responses == 7

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        ResultExporter.save_group(BenchmarkGroup("Empty", "ms"), path)
        with pytest.raises(ValueError):
            ResultExporter.load_group(path)

    def test_save_groups_skips_empty(self, latency_group, tmp_path):
        written = ResultExporter.save_groups([latency_group, BenchmarkGroup("API Throughput(More is better)", "req/s")], tmp_path / "out")

        assert list(written) == [latency_group.name]
        assert written[latency_group.name].exists()

    def test_format_table(self, latency_group):
        lines = ResultExporter.format_table(latency_group)
        assert lines[0] == latency_group.name
        assert "Albato" in lines[2]
        assert "nan" in lines[3]
