"""Processing passes over the task and archive documents.

A pass reads a whole document, transforms it in memory and writes it back in
full. Passes that find nothing to do write nothing, which also keeps a file
watcher from re-triggering on its own writes.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .archive import date_header, merge_text
from .config import ConfigModel
from .exceptions import DocumentNotFoundError, DocumentReadError
from .extractor import extract
from .repeat import roll_completed_today
from .storage import DocumentStore
from .utils.datetime import format_date, next_day, now_local


logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Summary of one processing pass."""
    archived: int = 0
    rescheduled: int = 0
    rolled: int = 0
    task_written: bool = False
    archive_written: bool = False
    skipped_reason: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.task_written or self.archive_written


class TaskProcessor:
    """Runs extraction, archiving and repeat-date passes for one vault."""

    def __init__(
        self,
        config: ConfigModel,
        store: Optional[DocumentStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self.store = store or DocumentStore(config)
        self.clock = clock or now_local

    def _read_task_lines(self) -> Tuple[Optional[List[str]], Optional[str]]:
        """Read the task document, or explain why it cannot be processed."""
        task_file = self.config.task_file
        try:
            return self.store.read_text(task_file).split("\n"), None
        except DocumentNotFoundError:
            logger.info(f"Task document {task_file} not found, skipping")
            return None, "task document not found"
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read task document {task_file}: {e}")
            return None, "task document unreadable"

    def process_task_file(self) -> PassResult:
        """Move completed tasks into the archive and reschedule recurring ones."""
        lines, reason = self._read_task_lines()
        if lines is None:
            return PassResult(skipped_reason=reason)

        now = self.clock()
        date_format = self.config.effective_date_format
        today = format_date(now, date_format)
        stamp = None
        if self.config.stamp_completion_time:
            stamp = format_date(now, self.config.effective_time_format)

        extraction = extract(
            lines,
            today,
            next_date=format_date(next_day(now), date_format),
            header_marker=self.config.header_marker,
            sections=self.config.sections,
            completion_stamp=stamp,
        )
        if not extraction.has_completed:
            logger.debug("No completed tasks found")
            return PassResult(skipped_reason="nothing to archive")

        result = PassResult(
            archived=len(extraction.completed_lines),
            rescheduled=extraction.rescheduled,
        )

        # Archive content is built before anything is written
        archive_content = self.merge_done_tasks(extraction.completed_lines, today)

        self.store.write_text(self.config.task_file, "\n".join(extraction.keep_lines))
        result.task_written = True

        self.store.write_text(self.config.done_file, archive_content)
        result.archive_written = True

        logger.info(
            f"Archived {result.archived} task(s) to {self.config.done_file} "
            f"({result.rescheduled} recurring rescheduled)"
        )
        return result

    def merge_done_tasks(self, completed_lines: List[str], today: str) -> str:
        """Return the archive text with completed lines under today's header.

        Raises:
            DocumentReadError: If the archive exists but cannot be read
        """
        done_file = self.config.done_file
        self.store.create_empty(done_file)

        try:
            archive_text = self.store.read_text(done_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read archive document {done_file}: {e}")
            raise DocumentReadError(f"Could not read archive document {done_file}: {e}") from e

        header = date_header(today, self.config.header_marker)
        return merge_text(archive_text, completed_lines, header, self.config.header_marker)

    def check_repeat_dates(self) -> PassResult:
        """Uncheck recurring tasks that are checked and scheduled for today."""
        lines, reason = self._read_task_lines()
        if lines is None:
            return PassResult(skipped_reason=reason)

        today = format_date(self.clock(), self.config.effective_date_format)
        roll = roll_completed_today(
            lines,
            today,
            header_marker=self.config.header_marker,
            sections=self.config.sections,
        )
        if not roll.changed:
            return PassResult(skipped_reason="no recurring tasks due today")

        self.store.write_text(self.config.task_file, "\n".join(roll.updated_lines))
        logger.info(f"Unchecked {roll.rolled} recurring task(s) due {today}")
        return PassResult(rolled=roll.rolled, task_written=True)

    def startup(self) -> Tuple[PassResult, PassResult]:
        """Run the repeat-date check, then a processing pass."""
        return self.check_repeat_dates(), self.process_task_file()
