"""utils/sampling.py"""
import numpy as np
import pandas as pd

from config.config import SAMPLING_CONFIG


def sample_grid(start, stop, num=None):
    """[start, stop] 上的等距采样点（包含端点）"""
    num = SAMPLING_CONFIG['num_points'] if num is None else int(num)
    if num < 2:
        raise ValueError("num must be at least 2")
    return np.linspace(float(start), float(stop), num)


def tabulate(expression, start, stop, num=None):
    """对表达式制表：返回以 x 为索引的 Series"""
    xs = sample_grid(start, stop, num)
    values = expression.evaluate(xs)
    return pd.Series(values, index=pd.Index(xs, name='x'), name='f(x)')


def sign_change_brackets(xs, ys):
    """
    找出相邻且都有限的采样点之间的变号区间

    Returns:
        [(x_left, x_right), ...]，按 x 升序
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if len(xs) < 2:
        return []

    finite = np.isfinite(ys)
    with np.errstate(all='ignore'):
        product = ys[:-1] * ys[1:]
    mask = finite[:-1] & finite[1:] & (product < 0)

    return [(float(xs[i]), float(xs[i + 1])) for i in np.flatnonzero(mask)]
