"""Tests for the emit trace observer and settings wiring."""

from unittest.mock import MagicMock

from message_emit.boundary import RequestBoundary
from message_emit.config import Settings
from message_emit.contracts.message import ERROR_ROLE, MESSAGE_ROLE
from message_emit.deps import create_accumulator, create_request_boundary, get_emit_observer
from message_emit.services.accumulator import MessageAccumulator
from message_emit.services.emit_trace import EmitTraceObserver
from message_emit.services.session import InMemorySessionStore


class TestEmitTraceObserver:
    """Unit tests for EmitTraceObserver."""

    def test_one_debug_entry_per_append(self):
        sink = MagicMock()
        acc = MessageAccumulator(ERROR_ROLE, observer=EmitTraceObserver(sink))
        acc.reinit("req-1", True)

        acc.append("org.bedework.error.nosuchevent", "uid-1")

        sink.debug.assert_called_once_with(
            "message_emitted",
            property="org.bedework.error.nosuchevent",
            ptype="str",
            values="uid-1",
            role="error",
            interaction_id="req-1",
        )

    def test_null_param_label(self):
        sink = MagicMock()
        acc = MessageAccumulator(MESSAGE_ROLE, observer=EmitTraceObserver(sink))
        acc.append("id", None)

        kwargs = sink.debug.call_args.kwargs
        assert kwargs["ptype"] == "null object"
        assert kwargs["values"] == "null"
        assert acc.get_records()[0].params == ()

    def test_multiple_params_label(self):
        sink = MagicMock()
        acc = MessageAccumulator(MESSAGE_ROLE, observer=EmitTraceObserver(sink))
        acc.append("id", "a", "b", "c")
        kwargs = sink.debug.call_args.kwargs
        assert kwargs["ptype"] == "3objects"
        assert kwargs["values"] == "a; b; c"

    def test_trace_does_not_change_records(self):
        traced = MessageAccumulator(ERROR_ROLE, observer=EmitTraceObserver(MagicMock()))
        plain = MessageAccumulator(ERROR_ROLE)
        for acc in (traced, plain):
            acc.append("a")
            acc.append("b", None, 2)
        assert traced.get_records() == plain.get_records()

    def test_default_logger(self):
        assert EmitTraceObserver()._logger is not None


class TestDeps:
    """Settings-driven factories."""

    def test_observer_disabled_by_default(self):
        assert get_emit_observer(Settings(_env_file=None)) is None

    def test_observer_enabled(self):
        observer = get_emit_observer(Settings(_env_file=None, emit_trace=True))
        assert isinstance(observer, EmitTraceObserver)

    def test_create_accumulator_unlocked(self):
        acc = create_accumulator(MESSAGE_ROLE, Settings(_env_file=None, lock_accumulators=False))
        assert acc.role == MESSAGE_ROLE
        assert acc.observer is None
        acc.append("x")
        assert acc.count == 1

    def test_create_request_boundary_uses_settings(self):
        store = InMemorySessionStore()
        store.get_session(create_if_absent=True)
        settings = Settings(_env_file=None, emit_trace=True, clear_on_bind=False)

        boundary = create_request_boundary(store, "req-1", settings=settings)

        assert isinstance(boundary, RequestBoundary)
        assert boundary.clear is False
        assert isinstance(boundary.observer, EmitTraceObserver)

    def test_explicit_clear_wins(self):
        store = InMemorySessionStore()
        settings = Settings(_env_file=None, clear_on_bind=False)
        boundary = create_request_boundary(store, "req-1", clear=True, settings=settings)
        assert boundary.clear is True
