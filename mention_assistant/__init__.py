"""
Mention Assistant.

Detects assistant mentions in user text and answers them with a remote
completion model, with caching and branded failure messages.
"""

__version__ = "0.1.0"
