# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tenant_router

import os
import sys

from loguru import logger

LOG_LEVEL = os.environ.get("TENANT_ROUTER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("TENANT_ROUTER_LOG_FILE")

# Remove default handler
logger.remove()

# Sink 1: Stderr (Human-readable)
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    ),
)

# Sink 2: File (JSON, Rotation, Retention), opt-in
if LOG_FILE:
    logger.add(
        LOG_FILE,
        rotation="500 MB",
        retention="10 days",
        serialize=True,
        enqueue=True,
        level=LOG_LEVEL,
    )

__all__ = ["logger"]
