#!/usr/bin/env python3
"""
Main entry point for the Line Change Timer web application.

This script launches the Flask-based web server. Settings come from the
LINECHANGE_* environment variables (see linechange/config.py).
"""
import os

from linechange.ui.web_app import run_web_app

if __name__ == "__main__":
    # Serve index.html from the project root unless configured otherwise
    project_root = os.path.dirname(os.path.abspath(__file__))
    run_web_app(static_folder=os.environ.get("LINECHANGE_STATIC_FOLDER", project_root))
