"""Bridge pattern demo: message categories decoupled from delivery channels."""

__version__ = "0.1.0"
