"""Twitter adapter."""

from .client import MockTwitterPoster, RealTwitterPoster, TwitterPoster

__all__ = ["TwitterPoster", "RealTwitterPoster", "MockTwitterPoster"]
