from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings


class LoggingConfig(BaseSettings):
    LOG_LEVEL: str = Field(
        description="Root logging level, e.g. DEBUG, INFO, WARNING",
        default="INFO",
    )

    LOG_FILE: str | None = Field(
        description="Log file path, logs go to stdout only when unset",
        default=None,
    )

    LOG_FILE_MAX_SIZE: PositiveInt = Field(
        description="Maximum log file size in MB before rotation",
        default=20,
    )

    LOG_FILE_BACKUP_COUNT: PositiveInt = Field(
        description="Number of rotated log files to keep",
        default=5,
    )

    LOG_FORMAT: str = Field(
        description="Format string for log records",
        default="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] [%(filename)s:%(lineno)d] %(trace_id)s - %(message)s",
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format for log records",
        default=None,
    )

    LOG_TZ: str | None = Field(
        description="Timezone for log timestamps, e.g. Asia/Shanghai",
        default=None,
    )
