"""
TuneBridge Timing Utilities
시간 측정 유틸리티
"""

import time
import logging

logger = logging.getLogger(__name__)


class Timer:
    """컨텍스트 매니저 타이머"""

    def __init__(self, name: str = ""):
        self.name = name
        self.elapsed: float = 0.0
        self._start = time.perf_counter()

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self.elapsed = time.perf_counter() - self._start
        if self.name:
            logger.debug(f"{self.name} took {self.elapsed:.4f}s")

    @property
    def elapsed_ms(self) -> float:
        """블록 안에서는 현재까지, 종료 후에는 전체 경과 시간 (ms)"""
        if self.elapsed:
            return self.elapsed * 1000.0
        return (time.perf_counter() - self._start) * 1000.0
