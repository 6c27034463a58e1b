"""Main entry point for MedInsight."""

import sys

from .core.config import setup_logging
from .ui import run_streamlit_app


def main():
    """Launch the dashboard."""
    setup_logging()
    sys.exit(run_streamlit_app())


if __name__ == "__main__":
    main()
