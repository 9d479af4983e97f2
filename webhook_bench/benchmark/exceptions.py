"""Custom exceptions for the benchmarking system."""


class BenchmarkExecutionError(Exception):
    """Raised when a benchmark group run fails as a whole."""

    def __init__(self, message: str, group_name: str = ""):
        super().__init__(message)
        self.message = message
        self.group_name = group_name


class UnknownBenchmarkGroupError(KeyError):
    """Raised when a benchmark group name is not defined."""

    def __init__(self, group_name: str):
        super().__init__(group_name)
        self.group_name = group_name

    def __str__(self) -> str:
        return f"Unknown benchmark group: {self.group_name}"


class BenchmarkBusyError(Exception):
    """Raised when a run is requested while another one is in progress."""
    pass
