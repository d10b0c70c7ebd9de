"""daycycle-tween - Eased visual blends between day parts."""
from __future__ import annotations

from daycycle_tween.blender import SkyBlender, SkyState
from daycycle_tween.easing import EASINGS, lerp, lerp_color

__all__ = ["SkyBlender", "SkyState", "EASINGS", "lerp", "lerp_color"]
