"""求根模块"""
from .root_finder import find_root, find_roots

__all__ = ['find_root', 'find_roots']
