"""recordlens - asynchronous analysis of timestamped numeric records.

Public API:
    Record, AnalysisResult      - domain models
    Analyzer, analyze           - asynchronous and synchronous pipeline
    ProcessingError             - failure of an analysis run
    ProcessingSystem            - store + worker pool + analyzer
"""

__version__ = "1.0.0"

import logging

from recordlens.adapters.scheduling import InlineScheduler, ThreadPoolScheduler
from recordlens.adapters.storage import InMemoryRecordStore, RingBufferRecordStore
from recordlens.core.analyzer import Analyzer, analyze
from recordlens.core.config import AnalysisThresholds, EngineConfig
from recordlens.core.errors import ConfigurationError, ProcessingError
from recordlens.core.models import AnalysisResult, Record
from recordlens.core.ports import RecordStorePort, TaskSchedulerPort
from recordlens.system import ProcessingSystem

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnalysisResult",
    "AnalysisThresholds",
    "Analyzer",
    "ConfigurationError",
    "EngineConfig",
    "InMemoryRecordStore",
    "InlineScheduler",
    "ProcessingError",
    "ProcessingSystem",
    "Record",
    "RecordStorePort",
    "RingBufferRecordStore",
    "TaskSchedulerPort",
    "ThreadPoolScheduler",
    "analyze",
]
