"""Rhythm game building blocks: chart and replay readers, input keys, controls, layout and chart lists."""

__version__ = "0.1.0"