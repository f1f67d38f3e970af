from pydantic import Field
from pydantic_settings import SettingsConfigDict

from configs.http_config import HttpClientConfig
from configs.logging_config import LoggingConfig
from configs.packaging import PackagingInfo


class AppConfig(HttpClientConfig, LoggingConfig, PackagingInfo):
    PROJECT_NAME: str = Field(default="rest_client")

    model_config = SettingsConfigDict(
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )


app_config: AppConfig = AppConfig()

__all__ = ["AppConfig", "app_config"]
