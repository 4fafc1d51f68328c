"""工具模块"""
from .report import tabulate_formulas, summarize

__all__ = ['tabulate_formulas', 'summarize']
