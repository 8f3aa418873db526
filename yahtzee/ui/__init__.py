"""Streamlit presentation layer for Yahtzee."""
