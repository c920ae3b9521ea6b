"""
Touch Pong - a human versus computer pong game
"""

__version__ = "0.1.0"
