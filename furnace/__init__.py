"""Minecraft launcher core: instances, components, library checks and launch commands."""

__version__ = "0.1.0"