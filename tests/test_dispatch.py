"""Tests du dispatcher du thread principal, avec une fausse racine Tk."""

import threading
from unittest.mock import Mock

from postfeed.ui.dispatch import POLL_INTERVAL_MS, MainThreadDispatcher


def _root():
    root = Mock()
    root.after.return_value = "after#1"
    return root


class TestMainThreadDispatcher:
    def test_drain_runs_callbacks_in_order(self):
        dispatcher = MainThreadDispatcher(_root())
        calls = []
        dispatcher.submit(lambda: calls.append(1))
        dispatcher.submit(lambda: calls.append(2))

        assert dispatcher.drain() == 2
        assert calls == [1, 2]
        assert dispatcher.drain() == 0

    def test_submit_from_worker_thread_runs_on_drain(self):
        dispatcher = MainThreadDispatcher(_root())
        ran_on = []

        worker = threading.Thread(
            target=lambda: dispatcher.submit(lambda: ran_on.append(threading.current_thread()))
        )
        worker.start()
        worker.join()

        assert ran_on == []
        dispatcher.drain()
        assert ran_on == [threading.current_thread()]

    def test_failing_callback_does_not_stop_drain(self):
        dispatcher = MainThreadDispatcher(_root())
        calls = []

        def broken():
            raise RuntimeError("boom")

        dispatcher.submit(broken)
        dispatcher.submit(lambda: calls.append("ok"))

        assert dispatcher.drain() == 2
        assert calls == ["ok"]

    def test_start_schedules_poll_once(self):
        root = _root()
        dispatcher = MainThreadDispatcher(root)

        dispatcher.start()
        dispatcher.start()

        root.after.assert_called_once()
        assert root.after.call_args.args[0] == POLL_INTERVAL_MS

    def test_poll_drains_and_reschedules(self):
        root = _root()
        dispatcher = MainThreadDispatcher(root)
        calls = []
        dispatcher.start()
        poll = root.after.call_args.args[1]

        dispatcher.submit(lambda: calls.append("x"))
        poll()

        assert calls == ["x"]
        assert root.after.call_count == 2

    def test_close_drops_pending_and_future_work(self):
        root = _root()
        dispatcher = MainThreadDispatcher(root)
        calls = []
        dispatcher.start()
        dispatcher.submit(lambda: calls.append("pending"))

        dispatcher.close()
        dispatcher.submit(lambda: calls.append("late"))

        assert dispatcher.closed
        assert dispatcher.drain() == 0
        assert calls == []
        root.after_cancel.assert_called_once_with("after#1")

        dispatcher.start()
        assert root.after.call_count == 1
