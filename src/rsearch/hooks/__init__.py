from .progress import HistoryRecorder, ProgressLogger

__all__ = ["HistoryRecorder", "ProgressLogger"]
