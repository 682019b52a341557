import sys
from pathlib import Path
from typing import Any

from loguru import logger

from publish_core.config_manager import ConfigManager

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(
    log_dir: str = "logs",
    rotation: str = "10 MB",
    retention: str = "10 days",
    level: str = "INFO",
    app_name: str = "autopublish",
) -> Any:
    """
    Routes loguru output to stderr plus three rotating files under ``log_dir``:
    ``<app_name>.log`` (everything), ``<app_name>.json.log`` (serialized, INFO+)
    and ``error.log``.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    logger.add(
        log_path / f"{app_name}.log",
        rotation=rotation,
        retention=retention,
        level="DEBUG",
        compression="zip",
    )
    logger.add(
        log_path / f"{app_name}.json.log",
        rotation=rotation,
        retention=retention,
        level="INFO",
        serialize=True,
    )
    logger.add(log_path / "error.log", rotation=rotation, retention=retention, level="ERROR")

    logger.debug(f"Logging to {log_path.absolute()} at level {level}")
    return logger


def setup_logger_from_config(config_manager: ConfigManager, level: str = "") -> Any:
    log_cfg = config_manager.logging
    return setup_logger(
        log_dir=config_manager.paths.log_dir,
        rotation=log_cfg.rotation,
        retention=log_cfg.retention,
        level=level or log_cfg.level,
    )
