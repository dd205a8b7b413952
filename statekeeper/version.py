"""
Contains the current version of statekeeper which is used in setup.py
"""
__version__ = '0.4.0'
