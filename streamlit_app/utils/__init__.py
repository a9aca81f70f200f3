"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- recipe_display: Formatting helpers for recipe cards and details
"""
