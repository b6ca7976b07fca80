"""
Cleaning Dispatch Service.

Booking and dispatch backend for a home-cleaning service.
"""

__version__ = "0.1.0"
__description__ = "Cleaning Dispatch Service"
