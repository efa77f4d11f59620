"""工具模块"""
from .sampling import sample_grid, tabulate, sign_change_brackets

__all__ = ['sample_grid', 'tabulate', 'sign_change_brackets']
