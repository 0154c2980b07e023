"""
Model configuration and prompt context helpers for Open Canvas agents.
"""
