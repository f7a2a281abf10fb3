#!/usr/bin/env python3
"""
Weights endpoints - manage the default factor weights.
"""

from fastapi import APIRouter

from ..services.weights_service import get_weights_service
from ..services.match_service import weights_response
from ..models.requests import WeightsUpdate
from ..models.responses import WeightsResponse, WeightPresetsResponse

router = APIRouter(prefix="/api", tags=["weights"])


@router.get("/v1/weights", response_model=WeightsResponse)
def get_weights():
    """
    Get the current default weights.

    These are used by ranking requests that do not supply their own weights.
    """
    return weights_response(get_weights_service().get_current_weights())


@router.put("/v1/weights", response_model=WeightsResponse)
def update_weights(weights_update: WeightsUpdate):
    """
    Replace the current default weights.

    All weights must be >= 0 and sum to 1.0 (within 0.01). Rankings already
    in progress keep the weights they started with.
    """
    weights = get_weights_service().update_weights(
        style=weights_update.style,
        goals=weights_update.goals,
        experience=weights_update.experience,
        preferences=weights_update.preferences
    )
    return weights_response(weights)


@router.post("/v1/weights/preset/{preset_name}", response_model=WeightsResponse)
def apply_preset(preset_name: str):
    """
    Apply a weight preset.

    Presets:
    - balanced: style=0.30, goals=0.30, experience=0.15, preferences=0.25
    - goal_focused: style=0.20, goals=0.45, experience=0.10, preferences=0.25
    - style_focused: style=0.45, goals=0.20, experience=0.10, preferences=0.25
    - experience_focused: style=0.20, goals=0.20, experience=0.40, preferences=0.20
    """
    return weights_response(get_weights_service().apply_preset(preset_name))


@router.get("/v1/weights/presets", response_model=WeightPresetsResponse)
def get_presets():
    """List the available weight presets."""
    presets = get_weights_service().get_presets()
    return WeightPresetsResponse(
        presets={name: weights_response(w) for name, w in presets.items()}
    )
