"""media-organizer: sort photos and videos into a deduplicated date archive."""

__version__ = "0.1.0"
