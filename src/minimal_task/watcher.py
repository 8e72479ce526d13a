"""Watch the task document and process it whenever it changes."""

import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exceptions import MinimalTaskError
from .processor import PassResult, TaskProcessor


logger = logging.getLogger(__name__)


class TaskFileEventHandler(FileSystemEventHandler):
    """Runs a processing pass for events that touch the task document."""

    def __init__(self, processor: TaskProcessor, on_result: Optional[Callable[[PassResult], None]] = None):
        super().__init__()
        self.processor = processor
        self.on_result = on_result
        self.task_path = processor.store.resolve(processor.config.task_file).resolve()
        # Passes never overlap; events arrive on the observer thread
        self._lock = threading.Lock()

    def _is_task_file(self, path) -> bool:
        if not path:
            return False
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.task_path

    def _handle(self, path) -> None:
        if not self._is_task_file(path):
            return

        with self._lock:
            try:
                result = self.processor.process_task_file()
            except MinimalTaskError:
                # Keep the observer thread alive for later events
                logger.exception(f"Processing {self.task_path.name} failed")
                return

        if result.changed:
            logger.info(f"Processed {self.task_path.name}: {result.archived} task(s) archived")
        if self.on_result is not None:
            self.on_result(result)

    def on_modified(self, event: FileSystemEvent):
        if event.is_directory:
            return
        self._handle(event.src_path)

    def on_created(self, event: FileSystemEvent):
        if event.is_directory:
            return
        self._handle(event.src_path)

    def on_moved(self, event: FileSystemEvent):
        if event.is_directory:
            return
        self._handle(getattr(event, "dest_path", None))


class TaskFileWatcher:
    """Owns a watchdog observer scheduled on the task document's directory."""

    def __init__(self, processor: TaskProcessor, on_result: Optional[Callable[[PassResult], None]] = None):
        self.processor = processor
        self.handler = TaskFileEventHandler(processor, on_result)
        self.observer = None

    @property
    def watch_dir(self) -> Path:
        return self.handler.task_path.parent

    def start(self) -> None:
        """Start watching; the directory must exist."""
        self.observer = Observer()
        self.observer.schedule(self.handler, str(self.watch_dir), recursive=False)
        self.observer.start()
        logger.info(f"Watching {self.handler.task_path}")

    def stop(self) -> None:
        if self.observer is None:
            return
        self.observer.stop()
        self.observer.join()
        self.observer = None
        logger.info("Watcher stopped")

    def run_forever(self, poll_interval: float = 1.0) -> None:
        """Run the startup routine, then watch until interrupted."""
        self.processor.startup()
        self.start()
        try:
            while True:
                time.sleep(poll_interval)
        except KeyboardInterrupt:
            logger.info("Shutdown requested, stopping watcher")
        finally:
            self.stop()
