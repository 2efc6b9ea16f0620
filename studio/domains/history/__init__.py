from studio.domains.history.entities import Snapshot, UndoRedoHistory, MAX_HISTORY_SIZE

__all__ = ["Snapshot", "UndoRedoHistory", "MAX_HISTORY_SIZE"]
