"""Headless game logic for a small side-scrolling shooter: scene, sprites, input, camera and meshes."""

__version__ = "0.1.0"