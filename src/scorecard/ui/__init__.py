"""Presentation helpers for the Streamlit front end."""
