"""Single worker thread fed by a bounded command queue."""

import queue
import threading
from typing import Callable

from loguru import logger

from blockwatch.cli.services.command_service import CommandResult, CommandService


class CommandWorker:
    """
    Bounded queue: put(line) blocks when full; one worker thread executes
    lines in order, so the client never sees two commands at once.
    """

    def __init__(
        self,
        service: CommandService,
        on_result: Callable[[str, CommandResult], None],
        *,
        maxsize: int = 16,
    ):
        self.service = service
        self.on_result = on_result
        self._q: queue.Queue[str | None] = queue.Queue(maxsize=maxsize)
        self._thread: threading.Thread | None = None

    def put(self, line: str) -> None:
        self._q.put(line)

    def wait_idle(self) -> None:
        """Block until every queued command has been executed."""
        self._q.join()

    def _worker(self) -> None:
        while True:
            item = self._q.get()
            try:
                if item is None:
                    break
                self.on_result(item, self.service.execute(item))
            except Exception as e:
                logger.warning(f"Command output failed for {item!r}: {e}")
            finally:
                self._q.task_done()

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._worker, daemon=True)
        self._thread.start()
        logger.debug("Command worker started")

    def stop(self) -> None:
        if self._thread is None:
            return
        self._q.put(None)
        self._thread.join(timeout=5.0)
        self._thread = None
