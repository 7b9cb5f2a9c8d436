"""Widget logic without a toolkit: springs, easing, colours, theme palettes and input state machines."""

__version__ = "0.1.0"