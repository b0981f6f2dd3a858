"""Application configuration using Pydantic Settings."""

import logging
from typing import Literal

from pydantic_settings import BaseSettings


class TransferCenterConfig(BaseSettings):
    """Application configuration loaded from environment variables."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    fhir_base_url: str = ""
    fhir_access_token: str = ""
    http_timeout_seconds: float = 30.0

    ack_sending_application: str = "TRANSFER-CENTER"
    ack_sending_facility: str = ""

    model_config = {"env_prefix": "TRANSFER_CENTER_", "case_sensitive": False}


def configure_logging(config: TransferCenterConfig) -> None:
    """Install a root log handler at the configured level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = ["TransferCenterConfig", "configure_logging"]
