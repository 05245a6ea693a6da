"""Wireframe viewer for height-map grids, with colour-name and XPM decoding helpers."""

__version__ = "0.1.0"