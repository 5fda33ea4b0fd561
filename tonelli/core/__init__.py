"""
Contains the core elements that are used within tonelli

Core:
    -Provides the word-size and logging constants
    -Provides custom exceptions for the modular arithmetic functions
    -Provides the logger factory
"""
# core/__init__.py
from tonelli.core.exceptions import *
from tonelli.core.formats import *
from tonelli.core.logging import *
