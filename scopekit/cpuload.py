"""CPU load estimation by counting idle-loop iterations over a fixed interval."""

import time


class CpuLoadMeter:
    """Measures CPU load by comparing loop counts against an unloaded baseline."""

    def __init__(self, interval: float = 0.01) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.unloaded_count = 0

    def count(self) -> int:
        """Spin for one interval and return how many iterations completed."""
        deadline = time.perf_counter() + self.interval
        iterations = 0
        while time.perf_counter() < deadline:
            iterations += 1
        return iterations

    def calibrate(self) -> int:
        """Record and return the iteration count of an unloaded interval."""
        self.unloaded_count = self.count()
        return self.unloaded_count

    def load(self, loaded_count: int) -> float:
        """Return the load fraction implied by ``loaded_count`` iterations."""
        if self.unloaded_count <= 0:
            raise RuntimeError("meter has not been calibrated")
        return 1.0 - loaded_count / self.unloaded_count