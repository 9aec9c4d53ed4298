"""Docker setup wrapper for the tennis ranking system"""

__version__ = "0.1.0"
