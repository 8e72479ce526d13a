"""Minimal Task - archive completed Markdown tasks and reschedule recurring ones."""

__version__ = "0.1.0"

from .classifier import (
    ClassifiedLine,
    LineKind,
    SectionKind,
    SectionNames,
    classify,
)
from .extractor import ExtractionResult, extract
from .archive import date_header, merge, merge_text
from .repeat import RollResult, roll_completed_today
from .config import ConfigModel, load_config, save_config
from .processor import PassResult, TaskProcessor

__all__ = [
    "ClassifiedLine",
    "LineKind",
    "SectionKind",
    "SectionNames",
    "classify",
    "ExtractionResult",
    "extract",
    "date_header",
    "merge",
    "merge_text",
    "RollResult",
    "roll_completed_today",
    "ConfigModel",
    "load_config",
    "save_config",
    "PassResult",
    "TaskProcessor",
    "__version__",
]
