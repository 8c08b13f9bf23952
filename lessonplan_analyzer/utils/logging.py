import os
import logging
from typing import Optional

def setup_logging(name: str = "lessonplan_analyzer", level: Optional[str] = None) -> logging.Logger:
    level = (level or os.getenv("LESSONPLAN_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger(name)
