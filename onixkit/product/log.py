import logging

from onixkit.utils.logger import LoggerManager
from onixkit.utils.task_paths import TaskPaths


def get_logger(level: str = "INFO") -> logging.Logger:
    # product events -> logs/product.log (JSON lines)
    logger = LoggerManager.get_logger(
        name="product", task_paths=TaskPaths(), level=level, use_json=True
    )
    # the logger is shared; each Product applies its own configured level
    return LoggerManager.set_level(logger, level)
