"""Source-to-source expander for the Elementary Swift UI macros."""

__version__ = "0.1.0"
