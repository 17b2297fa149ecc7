"""Excalidraw diagrams → monospace ASCII art for text prompts."""

__version__ = "0.1.0"
