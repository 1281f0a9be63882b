# Runtime settings for the thai-qr command line tool, read once from the
# environment; command line flags take precedence.
#
#   THAIQR_LOG_LEVEL      logging level name (default WARNING)
#   THAIQR_OUTPUT_FORMAT  json or text (default json)
#   THAIQR_STRICT         verify the CRC before decoding (default false)

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS = ("json", "text")


class CLIConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = Field("WARNING", description="Root logger level")
    output_format: str = Field("json", description="Decode output format")
    strict: bool = Field(False, description="Verify the CRC before decoding")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level '{v}'")
        return v

    @field_validator("output_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format '{v}'. Allowed values: {list(OUTPUT_FORMATS)}"
            )
        return v

    @classmethod
    def from_env(cls, environ=None) -> "CLIConfig":
        environ = os.environ if environ is None else environ
        return cls(
            log_level=environ.get("THAIQR_LOG_LEVEL", "WARNING"),
            output_format=environ.get("THAIQR_OUTPUT_FORMAT", "json"),
            strict=environ.get("THAIQR_STRICT", "false").strip().lower() in ("1", "true", "yes"),
        )
