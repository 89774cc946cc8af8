"""Validated server settings."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerSettings(BaseModel):
    """
    Network and logging settings of the HTTP service.

    Frozen so the listening address cannot change once the server is built.
    """

    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="0.0.0.0", description="Interface to listen on")
    port: int = Field(default=8080, ge=1, le=65535, description="Server TCP port")
    log_level: LogLevel = Field(default="INFO", description="Service log level")
