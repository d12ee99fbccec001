from __future__ import annotations

from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal


class TaskSignals(QObject):
    completed = pyqtSignal(object)
    failed = pyqtSignal(object)


class _Runnable(QRunnable):
    def __init__(
        self,
        fn: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        signals: TaskSignals,
    ) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = signals

    def run(self) -> None:  # noqa: D401
        try:
            result = self.fn(*self.args, **self.kwargs)
        except Exception as exc:  # noqa: BLE001
            self.signals.failed.emit(exc)
        else:
            self.signals.completed.emit(result)


class TaskRunner:
    """Run blocking backend calls off the GUI thread.

    Callbacks are connected to signals owned by the GUI thread, so they run
    back on the event loop.
    """

    def __init__(self, *, max_threads: Optional[int] = None) -> None:
        self.pool = QThreadPool.globalInstance()
        if max_threads is not None:
            self.pool.setMaxThreadCount(max_threads)
        self._pending: set[TaskSignals] = set()

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        **kwargs: Any,
    ) -> TaskSignals:
        signals = TaskSignals()
        self._pending.add(signals)
        if on_success:
            signals.completed.connect(on_success)
        if on_error:
            signals.failed.connect(on_error)
        signals.completed.connect(lambda _result: self._pending.discard(signals))
        signals.failed.connect(lambda _exc: self._pending.discard(signals))
        self.pool.start(_Runnable(fn, args, kwargs, signals))
        return signals

