"""
Gradio user interface for AI Study Assistant.
"""
