from .progress import ProgressRecord, ConsoleProgress, chain
from .run_logger import RunLogger

__all__ = ["ProgressRecord", "ConsoleProgress", "chain", "RunLogger"]
