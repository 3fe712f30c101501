# lingosync\adapters\background_runner.py
import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

from lingosync.shared.config import settings

T = TypeVar("T")

class ThreadPoolBackgroundRunner:
    """
    Runs synchronous transforms in a small thread pool so that response
    reshaping does not block the event loop.
    """

    def __init__(self, max_workers: int = settings.BACKGROUND_WORKERS):
        # Thread pool for CPU-bound payload reshaping
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="lingosync-bg")

    async def run(self, fn: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, fn, *args)

    def shutdown(self) -> None:
        self.executor.shutdown(wait=False)
