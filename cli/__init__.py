"""CLI package for the BookStudio catalog"""
from .main import cli

__all__ = ['cli']
