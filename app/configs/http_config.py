from pydantic import Field, NonNegativeFloat, PositiveInt
from pydantic_settings import BaseSettings


class HttpClientConfig(BaseSettings):
    """
    Defaults for rest_client.Service
    """

    HTTP_BASE_URI: str = Field(
        description="Prefix joined in front of relative request urls, empty to require absolute urls",
        default="",
    )

    HTTP_TIMEOUT: NonNegativeFloat = Field(
        description="Request timeout in seconds, 0 falls back to the built-in default",
        default=5.0,
    )

    HTTP_PROXY: str = Field(
        description="Proxy url applied to every request, e.g. http://127.0.0.1:8080",
        default="",
    )

    HTTP_ENABLE_KEEP_ALIVE: bool = Field(
        description="Keep connections alive instead of sending Connection: close",
        default=False,
    )

    HTTP_ERROR_PAYLOAD_MAX_SIZE: PositiveInt = Field(
        description="Maximum number of response characters embedded in an error message",
        default=512,
    )
