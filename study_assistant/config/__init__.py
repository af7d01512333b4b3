"""
Configuration module for AI Study Assistant.

Usage:
    from study_assistant.config import settings as config
    # All config values are available as config.API_KEY, etc.
"""
