"""Streamlit rendering for the console; reads session snapshots only."""
