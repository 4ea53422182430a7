"""Streamlit entry point: `streamlit run streamlit_app.py`."""

from src.ui.streamlit_app import main

main()
