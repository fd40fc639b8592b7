import pytest

from tei_kit.trees import TreeConfig, create_tree_backend
from tei_kit.trees.base import TreeBackend


@pytest.fixture(params=["lxml", "etree"])
def backend(request: pytest.FixtureRequest) -> TreeBackend:
    """Every tree-dependent test runs against both realizations."""
    return create_tree_backend(TreeConfig(backend=request.param))


class RecordingMetricsHook:
    def __init__(self) -> None:
        self.latencies: list[tuple[str, dict[str, str] | None]] = []
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append((name, labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append((name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value))


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
