"""Clock operations behind an interface so install backoffs can be faked."""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock used by operations that wait."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block the calling thread.

        Args:
            seconds: How long to wait
        """
        ...
