"""Wall-clock Time implementation."""

import time

from rvm.core.time.abc import Time


class RealTime(Time):
    """Sleeps for real using time.sleep()."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
