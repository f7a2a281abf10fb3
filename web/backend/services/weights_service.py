#!/usr/bin/env python3
"""
Weights service - manages the default factor weights used for ranking.
"""

import logging
import math
import threading
from typing import Dict, Optional

from core.config_loader import MatchWeights, WEIGHT_PRESETS
from ..config import get_config
from ..exceptions import InvalidWeightsException, PresetNotFoundException

logger = logging.getLogger(__name__)

# Updated weights must sum to 1.0 within this tolerance
SUM_TOLERANCE = 0.01


class WeightsService:
    """
    Service for managing the current default weights.

    MatchWeights is immutable, so callers always get a snapshot: an update
    never changes weights already handed to an in-flight ranking.
    """

    def __init__(self, initial: Optional[MatchWeights] = None):
        self._default_weights = initial or get_config().matching.weights
        self._current_weights = self._default_weights
        self._lock = threading.Lock()

    def get_current_weights(self) -> MatchWeights:
        """
        Get the current weights.

        Returns:
            MatchWeights: The active weights.
        """
        with self._lock:
            return self._current_weights

    def update_weights(
        self,
        style: float,
        goals: float,
        experience: float,
        preferences: float
    ) -> MatchWeights:
        """
        Replace the current weights.

        Args:
            style: Workout style weight.
            goals: Goal overlap weight.
            experience: Experience proximity weight.
            preferences: Partner preference weight.

        Returns:
            Updated weights.

        Raises:
            InvalidWeightsException: If a weight is negative or not finite,
                or the weights do not sum to 1.0.
        """
        values = {
            'style': style,
            'goals': goals,
            'experience': experience,
            'preferences': preferences,
        }
        for name, value in values.items():
            if not math.isfinite(value) or value < 0:
                raise InvalidWeightsException(
                    f"{name} must be a finite number >= 0, got {value}"
                )

        total = sum(values.values())
        if abs(total - 1.0) > SUM_TOLERANCE:
            raise InvalidWeightsException(
                f"Weights must sum to 1.0, got {total:.3f}"
            )

        new_weights = MatchWeights(**values)
        with self._lock:
            self._current_weights = new_weights

        logger.info(f"Updated weights: {new_weights.as_dict()}")
        return new_weights

    def apply_preset(self, preset_name: str) -> MatchWeights:
        """
        Apply a weight preset.

        Args:
            preset_name: Name of the preset (balanced, goal_focused, style_focused, experience_focused).

        Returns:
            Applied weights.

        Raises:
            PresetNotFoundException: If preset is not found.
        """
        preset_name = preset_name.lower()

        if preset_name not in WEIGHT_PRESETS:
            raise PresetNotFoundException(
                f"Invalid preset '{preset_name}'. "
                f"Valid options: {', '.join(WEIGHT_PRESETS.keys())}"
            )

        weights = WEIGHT_PRESETS[preset_name]
        with self._lock:
            self._current_weights = weights

        logger.info(f"Applied weight preset '{preset_name}'")
        return weights

    def get_presets(self) -> Dict[str, MatchWeights]:
        """Get all available weight presets."""
        return WEIGHT_PRESETS.copy()

    def reset(self) -> None:
        """Restore the configured default weights."""
        with self._lock:
            self._current_weights = self._default_weights


# Global weights service instance
_weights_service = WeightsService()


def get_weights_service() -> WeightsService:
    """Get the global weights service instance."""
    return _weights_service
