"""
Controllers Package

Contains the interactive front ends that drive a game.
"""

from .console_controller import ConsoleController

__all__ = ['ConsoleController']
