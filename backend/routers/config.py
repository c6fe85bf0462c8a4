"""Configuration API endpoints"""

from __future__ import annotations

import codecs
import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

router = APIRouter()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    upload: dict | None = None
    logging: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    upload: dict
    logging: dict


def validate_upload_section(upload: dict[str, Any]):
    """Raise 400 for upload settings the service cannot honour"""
    if "maxBytes" in upload:
        max_bytes = upload["maxBytes"]
        if not isinstance(max_bytes, int) or isinstance(max_bytes, bool) or max_bytes <= 0:
            raise HTTPException(status_code=400, detail="maxBytes must be a positive integer")

    if "encoding" in upload:
        try:
            codecs.lookup(str(upload["encoding"]))
        except LookupError:
            raise HTTPException(status_code=400, detail=f"Unknown encoding: {upload['encoding']}")


def validate_logging_section(section: dict[str, Any]):
    if "level" in section and str(section["level"]).upper() not in LOG_LEVELS:
        raise HTTPException(status_code=400, detail=f"Unknown log level: {section['level']}")


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        upload=config.get("upload", {}),
        logging=config.get("logging", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.upload:
        validate_upload_section(request.upload)
        current_config["upload"] = {**current_config.get("upload", {}), **request.upload}
    if request.logging:
        validate_logging_section(request.logging)
        level = str(request.logging.get("level", current_config["logging"]["level"])).upper()
        current_config["logging"] = {**current_config.get("logging", {}), "level": level}
        logging.getLogger().setLevel(level)

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("Configuration updated")
    return {"status": "success", "message": "Configuration updated"}
