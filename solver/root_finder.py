"""区间求根 - 试位法(regula falsi)为默认方法"""
import logging

from scipy.optimize import brentq

from config.config import ROOT_FINDER_CONFIG, SAMPLING_CONFIG, ROOT_METHODS
from expression.exceptions import ComputationError
from utils.sampling import sample_grid, sign_change_brackets

logger = logging.getLogger(__name__)


def _check_preconditions(expression, a, b):
    """前置条件：含 x，且 f(a)·f(b) < 0"""
    if not expression.is_function_of_x:
        raise ComputationError("The expression is not a function of x!")

    fa = expression.evaluate(a)
    fb = expression.evaluate(b)
    if not fa * fb < 0:
        raise ComputationError("Root is not present in the given interval!")


def _regula_falsi(f, a, b, max_iterations, tolerance):
    m = (a + b) / 2
    iterations = 0
    while iterations < max_iterations and abs(f(m)) > tolerance:
        fa = f(a)
        fb = f(b)
        if fb == fa:
            break
        m = (a * fb - b * fa) / (fb - fa)

        # 用 m 替换与 f(m) 同号的端点，保证 [a, b] 始终包含变号
        if fa * f(m) < 0:
            b = m
        else:
            a = m
        iterations += 1
    return m, iterations


def _bisection(f, a, b, max_iterations, tolerance):
    m = (a + b) / 2
    iterations = 0
    while iterations < max_iterations and abs(f(m)) > tolerance:
        if f(a) * f(m) < 0:
            b = m
        else:
            a = m
        m = (a + b) / 2
        iterations += 1
    return m, iterations


def _brentq(f, a, b, max_iterations, tolerance):
    # brentq 按区间宽度判断收敛，tolerance 用作 xtol
    m, info = brentq(f, a, b, xtol=tolerance, maxiter=max_iterations,
                     full_output=True, disp=False)
    return m, info.iterations


_METHODS = {
    'regula_falsi': _regula_falsi,
    'bisection': _bisection,
    'brentq': _brentq,
}


def find_root(expression, a, b, method=None, max_iterations=None,
              tolerance=None, decimals=None):
    """
    在 [a, b] 上寻找表达式的一个根

    Args:
        expression: MathExpression
        a, b: 区间端点
        method: regula_falsi / bisection / brentq
        max_iterations: 迭代上限（默认100）
        tolerance: |f(m)| 收敛阈值（默认1e-10）；brentq 方法下作为区间宽度容差 xtol
        decimals: 返回值保留的小数位（默认10）
    Returns:
        float，四舍五入到 decimals 位；未收敛时返回最后一次估计值
    Raises:
        ComputationError: 不含 x，或区间端点不变号
        InvalidSyntaxError: 求值过程中的语法错误
    """
    method = method or ROOT_FINDER_CONFIG['method']
    if method not in ROOT_METHODS:
        raise ValueError(f"Unknown root finding method: {method}")
    max_iterations = ROOT_FINDER_CONFIG['max_iterations'] if max_iterations is None else max_iterations
    tolerance = ROOT_FINDER_CONFIG['tolerance'] if tolerance is None else tolerance
    decimals = ROOT_FINDER_CONFIG['decimals'] if decimals is None else decimals

    a = float(a)
    b = float(b)
    _check_preconditions(expression, a, b)

    m, iterations = _METHODS[method](expression.evaluate, a, b, max_iterations, tolerance)

    residual = abs(expression.evaluate(m))
    if not residual <= tolerance:
        logger.warning(f"{method} stopped after {iterations} iterations without converging "
                       f"(|f(m)|={residual:.3e}) for '{expression.infix}'")
    else:
        logger.debug(f"{method} converged in {iterations} iterations for '{expression.infix}'")

    return round(float(m), decimals)


def find_roots(expression, a, b, num_points=None, **kwargs):
    """
    扫描 [a, b]，对每个变号区间调用 find_root

    Returns:
        去重后按升序排列的根列表
    """
    if not expression.is_function_of_x:
        raise ComputationError("The expression is not a function of x!")

    lo, hi = min(a, b), max(a, b)
    xs = sample_grid(lo, hi, num_points or SAMPLING_CONFIG['num_points'])
    ys = expression.evaluate(xs)

    decimals = kwargs.get('decimals')
    decimals = ROOT_FINDER_CONFIG['decimals'] if decimals is None else decimals

    roots = set()
    # 采样点恰好为零
    for x_value in xs[ys == 0]:
        roots.add(round(float(x_value), decimals))

    for left, right in sign_change_brackets(xs, ys):
        roots.add(find_root(expression, left, right, **kwargs))

    logger.debug(f"Found {len(roots)} roots of '{expression.infix}' in [{lo}, {hi}]")
    return sorted(roots)
