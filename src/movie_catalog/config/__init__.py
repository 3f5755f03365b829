from movie_catalog.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
