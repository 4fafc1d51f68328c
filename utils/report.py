"""utils/report.py - 批量求值并整理成DataFrame"""
import logging

import pandas as pd

from config.config import REPORT_CONFIG
from core import RPNEvaluator, InfixRenderer, RPNError, tokenize

logger = logging.getLogger(__name__)


def tabulate_formulas(formulas, evaluator=None, renderer=None):
    """
    对一组RPN公式求值并渲染成中缀

    Parameters:
    - formulas: RPN字符串列表
    - evaluator: RPNEvaluator实例，默认新建
    - renderer: InfixRenderer实例，默认新建

    Returns:
    - DataFrame，列为 formula / infix / value / error
      value是可空整数列，失败时为<NA>；error为错误信息或None
    """
    evaluator = evaluator or RPNEvaluator()
    renderer = renderer or InfixRenderer()
    rows = []

    for formula in formulas:
        row = {'formula': formula, 'infix': None, 'value': None, 'error': None}
        try:
            row['value'] = evaluator.evaluate(tokenize(formula))
            row['infix'] = renderer.render(formula)
        except RPNError as e:
            row['error'] = e.message
            logger.warning(f"Failed to evaluate formula '{formula}': {e.message}")
        rows.append(row)

    df = pd.DataFrame(rows, columns=REPORT_CONFIG['columns'])
    # 直接从int构造，避免经过float丢失int64精度
    df['value'] = pd.array([row['value'] for row in rows], dtype=REPORT_CONFIG['value_dtype'])
    return df


def summarize(df):
    """统计成功/失败的公式数量"""
    failed = int(df['error'].notna().sum())
    return {'total': len(df), 'ok': len(df) - failed, 'failed': failed}
