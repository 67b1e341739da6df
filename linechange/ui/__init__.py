"""
UI package for the Line Change Timer.

This package contains the Flask web server the browser interface talks to.
"""
from .web_app import WebAppState, create_app, run_web_app

__all__ = ["WebAppState", "create_app", "run_web_app"]
