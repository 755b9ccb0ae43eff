"""Unit tests for the command metrics adapters."""

import datetime
from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from prometheus_client import CollectorRegistry, generate_latest
from pymongo import monitoring

from prommongo.adapters.command_metrics import FakeCommandMetrics, PrometheusCommandMetrics
from prommongo.core.protocols import CommandMetrics

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def finished(duration_micros: int) -> SimpleNamespace:
    """Minimal stand-in for CommandSucceededEvent / CommandFailedEvent."""
    return SimpleNamespace(duration_micros=duration_micros, command_name="find")


class CountingListener(monitoring.CommandListener):
    """Parent listener that counts every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def started(self, event):
        self.calls.append("started")

    def succeeded(self, event):
        self.calls.append("succeeded")

    def failed(self, event):
        self.calls.append("failed")


@pytest.fixture
def registry():
    return CollectorRegistry()


@pytest.fixture
def collector(registry):
    collector = PrometheusCommandMetrics(namespace="go_mongo")
    registry.register(collector)
    return collector


# ---------------------------------------------------------------------------
# PrometheusCommandMetrics
# ---------------------------------------------------------------------------


class TestPrometheusCommandMetrics:
    """Tests for the Prometheus command collector."""

    def test_satisfies_protocol(self):
        assert isinstance(PrometheusCommandMetrics(), CommandMetrics)

    def test_starts_at_zero(self, registry, collector):
        assert registry.get_sample_value("go_mongo_command_duration_ns") == 0.0
        assert collector.duration_ns == 0

    def test_describe_yields_single_gauge(self, collector):
        families = list(collector.describe())

        assert [f.name for f in families] == ["go_mongo_command_duration_ns"]
        assert families[0].type == "gauge"
        assert families[0].samples == []

    def test_describe_matches_collect(self, collector):
        described = [f.name for f in collector.describe()]
        collector.observe(5)
        collected = [f.name for f in collector.collect()]

        assert described == collected
        assert [f.name for f in collector.describe()] == described

    def test_succeeded_records_nanoseconds(self, registry, collector):
        collector.hook().succeeded(finished(1500))

        assert collector.duration_ns == 1_500_000
        assert registry.get_sample_value("go_mongo_command_duration_ns") == 1_500_000.0

    def test_failed_records_duration(self, collector):
        collector.hook().failed(finished(42))

        assert collector.duration_ns == 42_000

    def test_last_event_wins(self, registry, collector):
        listener = collector.hook()
        for micros in (900, 3, 12_000, 7):
            listener.succeeded(finished(micros))
        listener.failed(finished(250))

        assert registry.get_sample_value("go_mongo_command_duration_ns") == 250_000.0

    def test_started_does_not_touch_state(self, collector):
        collector.hook().started(SimpleNamespace(command_name="insert"))

        assert collector.duration_ns == 0

    def test_generate_latest_contains_family(self, registry, collector):
        collector.observe(10)
        output = generate_latest(registry).decode()

        assert "# HELP go_mongo_command_duration_ns Elapsed time of command." in output
        assert "go_mongo_command_duration_ns 10000.0" in output

    def test_namespace_defaults_to_settings(self):
        collector = PrometheusCommandMetrics()
        assert [f.name for f in collector.describe()] == ["go_mongo_command_duration_ns"]

    def test_custom_namespace(self):
        collector = PrometheusCommandMetrics(namespace="orders_db")
        assert [f.name for f in collector.describe()] == ["orders_db_command_duration_ns"]

    def test_instances_are_isolated(self):
        first = PrometheusCommandMetrics()
        second = PrometheusCommandMetrics()
        first.observe(1)

        assert second.duration_ns == 0

    def test_concurrent_writers_and_readers(self, registry, collector):
        listener = collector.hook()

        def work(i: int) -> None:
            listener.succeeded(finished(i))
            registry.get_sample_value("go_mongo_command_duration_ns")

        with ThreadPoolExecutor(max_workers=16) as pool:
            list(pool.map(work, range(1, 101)))

        assert collector.duration_ns in {i * 1000 for i in range(1, 101)}


# ---------------------------------------------------------------------------
# Chaining
# ---------------------------------------------------------------------------


class TestCommandListenerChaining:
    """The returned listener must keep the parent's behaviour."""

    def test_parent_called_once_per_event(self, collector):
        parent = CountingListener()
        listener = collector.hook(parent)

        listener.started(SimpleNamespace(command_name="find"))
        listener.succeeded(finished(10))
        listener.failed(finished(20))

        assert parent.calls == ["started", "succeeded", "failed"]
        assert collector.duration_ns == 20_000

    def test_parent_called_before_update(self, collector):
        seen = []
        parent = MagicMock(spec=monitoring.CommandListener)
        parent.succeeded.side_effect = lambda event: seen.append(collector.duration_ns)
        collector.observe(1)

        collector.hook(parent).succeeded(finished(99))

        assert seen == [1000]
        assert collector.duration_ns == 99_000

    def test_parent_exception_propagates(self, collector):
        parent = MagicMock(spec=monitoring.CommandListener)
        parent.failed.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            collector.hook(parent).failed(finished(5))

        assert collector.duration_ns == 0

    def test_listener_exposes_parent(self, collector):
        parent = CountingListener()
        assert collector.hook(parent).parent is parent
        assert collector.hook().parent is None

    def test_listener_is_pymongo_command_listener(self, collector):
        assert isinstance(collector.hook(), monitoring.CommandListener)


# ---------------------------------------------------------------------------
# FakeCommandMetrics
# ---------------------------------------------------------------------------


class TestFakeCommandMetrics:
    """Tests for the FakeCommandMetrics test helper."""

    def test_records_every_duration(self):
        fake = FakeCommandMetrics()
        listener = fake.hook()
        listener.succeeded(finished(1))
        listener.failed(finished(2))

        assert fake.durations_ns == [1000, 2000]
        assert fake.duration_ns == 2000
        assert fake.hook_calls == 1

    def test_clear_resets_all_state(self):
        fake = FakeCommandMetrics()
        fake.hook().succeeded(finished(1))
        fake.clear()

        assert fake.durations_ns == []
        assert fake.duration_ns == 0
        assert fake.hook_calls == 0


# ---------------------------------------------------------------------------
# pymongo event objects
# ---------------------------------------------------------------------------


def driver_event(event_type, duration: datetime.timedelta, **fields):
    return event_type(
        duration=duration,
        command_name="find",
        request_id=1,
        connection_id=("localhost", 27017),
        operation_id=1,
        **fields,
    )


class TestCommandMetricsWithDriverEvents:
    """Feed the collector the event types the driver actually publishes."""

    def test_succeeded_event_duration(self, registry, collector):
        event = driver_event(
            monitoring.CommandSucceededEvent, datetime.timedelta(milliseconds=250), reply={}
        )
        collector.hook().succeeded(event)

        assert event.duration_micros == 250_000
        assert registry.get_sample_value("go_mongo_command_duration_ns") == 250_000_000.0

    def test_failed_event_duration(self, collector):
        event = driver_event(
            monitoring.CommandFailedEvent, datetime.timedelta(seconds=2), failure={"ok": 0}
        )
        collector.hook().failed(event)

        assert collector.duration_ns == 2_000_000_000

    def test_listener_accepted_by_pymongo_event_listeners(self, collector):
        listener = collector.hook()
        listeners = monitoring._EventListeners([listener])

        assert listeners.enabled_for_commands
        assert listener in listeners.event_listeners()
