"""
Garage Portal: session and booking backend for the repair shop client.
"""

__version__ = "1.0.0"
