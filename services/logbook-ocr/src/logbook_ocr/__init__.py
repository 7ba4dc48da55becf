"""
Logbook OCR
Turns OCR output of a weekly logbook page into per-weekday activity text.
"""

__version__ = "0.1.0"
