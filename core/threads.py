# core/threads.py
from __future__ import annotations
import logging
import queue
import threading

from PySide6.QtCore import QRunnable, QThreadPool

from app.errors import ChannelClosedError
from core.events import KeyInput, Tick


class _Disconnected:
    def __init__(self, reason: str):
        self.reason = reason


class InputWorker(QRunnable):
    """Reads keys and emits ticks into the channel until stopped.

    The wait for keys is bounded by what is left of the current tick
    interval, so a tick goes out at most one read late.
    """

    def __init__(self, reader, channel: queue.Queue, clock, tick_ms: int = 200):
        super().__init__()
        self.setAutoDelete(False)
        self.reader = reader
        self.channel = channel
        self.clock = clock
        self.tick_ms = tick_ms
        self._stopped = threading.Event()
        self.finished = threading.Event()

    def stop(self):
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def run(self):
        try:
            self._loop()
        except Exception as e:
            logging.exception("Input worker failed")
            self._send(_Disconnected(f"{type(e).__name__}: {e}"))
        else:
            self._send(_Disconnected("input worker stopped"))
        finally:
            self.finished.set()

    def _loop(self):
        last_tick = self.clock.now()
        while not self.stopped:
            waited_ms = self.clock.since(last_tick) * 1000.0
            timeout = max(0.0, self.tick_ms - waited_ms) / 1000.0
            for key in self.reader.read_keys(timeout):
                if not self._send(KeyInput(key)):
                    return
            if self.clock.since(last_tick) * 1000.0 >= self.tick_ms:
                if self._send(Tick()):
                    last_tick = self.clock.now()

    def _send(self, item) -> bool:
        # blocks while the consumer is behind, but still honours stop()
        while True:
            try:
                self.channel.put(item, timeout=0.1)
                return True
            except queue.Full:
                if self.stopped:
                    return False


class EventSource:
    """Single-use iterator over the events produced by an InputWorker."""

    def __init__(self, reader, clock, tick_ms: int = 200, capacity: int = 64, pool: QThreadPool | None = None):
        self.channel: queue.Queue = queue.Queue(maxsize=capacity)
        self.worker = InputWorker(reader, self.channel, clock, tick_ms)
        self.pool = pool or Workers.pool
        self._started = False
        self._closed = False

    def start(self) -> "EventSource":
        if self._started:
            raise RuntimeError("event source cannot be restarted")
        self._started = True
        self.pool.start(self.worker)
        logging.debug("Input worker started (tick %d ms)", self.worker.tick_ms)
        return self

    def __iter__(self):
        return self

    def __next__(self):
        if not self._started:
            self.start()
        if self._closed:
            raise ChannelClosedError("event source is closed")
        item = self.channel.get()
        if isinstance(item, _Disconnected):
            self._closed = True
            raise ChannelClosedError(item.reason)
        return item

    def close(self, wait_ms: int = 1000) -> bool:
        self.worker.stop()
        self._closed = True
        if not self._started:
            return True
        done = self.worker.finished.wait(wait_ms / 1000.0)
        if not done:
            logging.warning("Input worker did not stop within %d ms", wait_ms)
        return done

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class Workers:
    pool = QThreadPool.globalInstance()
