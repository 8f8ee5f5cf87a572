"""Game model and 2D mesh geometry for a lane-based defence game: grid, plants, projectiles, suns and scene setup."""

__version__ = "0.1.0"