"""Dollar-cost averaging analyzer."""

__version__ = "0.1.0"
