"""Threshold evaluation for registry ratings."""

from constants import Rating, ThresholdMode


def exceeds_threshold(rating: Rating, mode: ThresholdMode) -> bool:
    """Return True when ``rating`` should fail the build under ``mode``.

    UNKNOWN has no level: it exceeds only under ANY.
    """
    if mode is ThresholdMode.ANY:
        return rating is not Rating.SAFE
    if mode is ThresholdMode.CAUTION:
        return rating.level is not None and rating.level >= Rating.CAUTION.level
    if mode is ThresholdMode.UNSAFE:
        return rating is Rating.UNSAFE
    raise ValueError(f"Unhandled threshold mode: {mode!r}")
