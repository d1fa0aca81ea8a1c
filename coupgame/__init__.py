"""Turn-based Coup game engine with role abilities, a scripted demo and a pygame table."""

__version__ = "0.1.0"
__all__ = ["game", "player", "roles", "demo", "controller", "gui"]