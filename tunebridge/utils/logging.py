"""
TuneBridge Logging Configuration
로깅 설정
"""

import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """로깅 설정"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
