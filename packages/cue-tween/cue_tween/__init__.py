"""cue-tween - Time-based interpolation of numeric object fields."""
from __future__ import annotations

from cue_tween.components import TweenTask
from cue_tween.easing import EASINGS, back_out, cubic_out, linear
from cue_tween.scheduler import TweenScheduler

__all__ = ["TweenTask", "TweenScheduler", "EASINGS", "linear", "cubic_out", "back_out"]
