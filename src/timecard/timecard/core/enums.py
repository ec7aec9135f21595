from __future__ import annotations

from enum import Enum


class EditMode(str, Enum):
    """Mode of the form editing session."""

    CREATING = "CREATING"
    EDITING = "EDITING"


class InvalidReason(str, Enum):
    """Why a worked duration cannot be computed."""

    MISSING_TIME = "MISSING_TIME"
    END_BEFORE_START = "END_BEFORE_START"
    BREAK_EXCEEDS_SHIFT = "BREAK_EXCEEDS_SHIFT"
