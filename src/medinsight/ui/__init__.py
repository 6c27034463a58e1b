"""Streamlit user interface for MedInsight."""

import subprocess
import sys
from pathlib import Path


def run_streamlit_app():
    """Launch the dashboard with the Streamlit runner."""
    app_path = Path(__file__).parent / "streamlit_app.py"
    return subprocess.call([sys.executable, "-m", "streamlit", "run", str(app_path)])
