"""
Global CSS Styling for the Recipe Catalog.

This module provides load_global_styles() to inject consistent styling
across all pages: card layout for recipe tiles, difficulty badges and
fixed-height images.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Catalog app.

    This function:
    - Sets global styles for headings
    - Styles recipe cards with rounded corners and subtle borders
    - Gives recipe images a fixed height with cropping
    - Styles the difficulty badge
    """
    css = """
    <style>
        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        .recipe-card {
            background: rgba(255, 255, 255, 0.9);
            border: 1px solid rgba(229, 231, 235, 0.5);
            border-radius: 0.75rem;
            overflow: hidden;
            margin-bottom: 0.75rem;
        }

        .recipe-card img {
            width: 100%;
            height: 14rem;
            object-fit: cover;
        }

        .recipe-card__body {
            padding: 1rem 1.25rem 0.5rem 1.25rem;
        }

        .recipe-card__description {
            color: #4b5563;
            font-size: 0.9rem;
            display: -webkit-box;
            -webkit-line-clamp: 2;
            -webkit-box-orient: vertical;
            overflow: hidden;
        }

        .recipe-card__meta {
            display: flex;
            justify-content: space-between;
            align-items: center;
            color: #6b7280;
            font-size: 0.85rem;
            margin-top: 0.75rem;
        }

        .recipe-badge {
            padding: 0.2rem 0.75rem;
            border-radius: 9999px;
            font-size: 0.75rem;
            font-weight: 700;
        }

        .recipe-hero img {
            width: 100%;
            max-height: 24rem;
            object-fit: cover;
            border-radius: 0.75rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
