from .page_shutdown_handler import PageShutdownHandler
from .task_cancellation_handler import TaskCancellationHandler

__all__ = [
    "PageShutdownHandler",
    "TaskCancellationHandler",
]
