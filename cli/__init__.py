"""
Console menu and command-line entry point
"""
from .menu import Menu

__all__ = ['Menu']
