"""
Image Classifier Client

A Streamlit front end for a remote image-classification service.

Architecture:
    - core/: Auth and upload workflows, state containers (framework-agnostic)
    - streamlit/: Presentation layer (Streamlit-specific)
    - api_client.py: HTTP access to the auth and prediction endpoints
    - config.py: Configuration from environment variables

Usage:
    streamlit run classifier_app/streamlit/main.py
"""

__version__ = "1.0.0"

from .config import AppConfig, get_config
from .api_client import ApiClient, get_client

__all__ = ["AppConfig", "get_config", "ApiClient", "get_client"]
