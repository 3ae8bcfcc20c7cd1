# abquiz/__init__.py
"""
A/B Quiz Scorer

A FastAPI service that sends forced-choice quiz answers to a language
model and turns its reply into balanced characteristic scores.
"""

__version__ = "1.0.0"
