"""
Scripture Content Studio.

Generates biblical stories and prayers plus their YouTube metadata
(titles, description, tags, thumbnail prompt, call-to-action) through an
LLM completion API.
"""

__version__ = "1.0.0"
