# lingosync/core/ports/background_runner.py
from typing import Any, Callable, Protocol, TypeVar

T = TypeVar("T")

class IBackgroundRunner(Protocol):
    """
    Port for running CPU-bound transforms off the main sequencing path.

    The awaiting coroutine resumes on the event loop once the transform is
    done, so results still reach the callbacks in order.
    """

    async def run(self, fn: Callable[..., T], *args: Any) -> T:
        ...

    def shutdown(self) -> None:
        ...
