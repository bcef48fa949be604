"""
Shared type definitions for schemas.

Centralizes common type annotations used across event and report schemas.

Layering:
- This module provides FOUNDATION types (BaseStrictModel, PermissiveModel, JsonDatetime)
- Domain modules (events.py, report.py) import from here
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import pydantic

# Pydantic-enhanced datetime for JSON input (allows string→datetime conversion)
JsonDatetime = Annotated[datetime, pydantic.Field(strict=False)]


# ==============================================================================
# Base Strict Model (Foundation)
# ==============================================================================


class BaseStrictModel(pydantic.BaseModel):
    """
    Foundation strict model for everything this package produces.

    Uses extra='forbid' to reject unknown fields, so a typo in a constructor
    call fails immediately instead of being dropped.
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )


# ==============================================================================
# Permissive Model (Foundation)
# ==============================================================================


class PermissiveModel(pydantic.BaseModel):
    """
    Foundation permissive model for records written by Claude Code.

    Symmetry with BaseStrictModel:
    - BaseStrictModel: extra='forbid' (rejects unknown fields)
    - PermissiveModel: extra='allow' (accepts unknown fields)

    Session files carry dozens of fields that change between Claude Code
    releases. Only the fields needed for reporting are modeled; everything
    else is captured as extra data and ignored.
    """

    model_config = pydantic.ConfigDict(
        extra='allow',  # Accept unknown fields (graceful fallback)
        strict=True,  # Strict type coercion for known fields
        frozen=True,  # Immutable after creation
    )
