from .color_scale import COLOR_BUCKETS, FALLBACK_COLOR, MISSING_COLOR, ColorScale

__all__ = ["COLOR_BUCKETS", "FALLBACK_COLOR", "MISSING_COLOR", "ColorScale"]
