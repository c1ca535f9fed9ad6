"""Root-finding utilities (Newton-Raphson with a numerical derivative)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import logging

logger = logging.getLogger(__name__)

Func = Callable[[float], float]

DEFAULT_GUESS = 0.1
DEFAULT_TOLERANCE = 1e-10
DEFAULT_MAX_ITERATIONS = 100
_MIN_DERIVATIVE = 1e-10
_MIN_STEP = 1e-8


@dataclass
class RootResult:
    root: float
    iterations: int
    converged: bool
    method: str


class UnsolvableError(RuntimeError):
    """Raised when root-finding fails to converge."""

    def __init__(
        self,
        message: str,
        *,
        iterations: int,
        last_guess: float,
        last_value: float,
    ) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.last_guess = last_guess
        self.last_value = last_value


def newton_raphson(
    func: Func,
    initial_guess: float = DEFAULT_GUESS,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Newton-Raphson root finder using a forward-difference derivative.

    There is no bracketing or bisection fallback: the caller supplies a guess
    inside the convergence basin, which holds for the monotone net present
    and future value objectives solved here.

    Parameters
    ----------
    func:
        Unary objective whose root is sought.
    initial_guess:
        Starting point for Newton iterations.
    tolerance:
        Absolute tolerance applied both to the objective value and to the
        Newton step.
    max_iterations:
        Iteration budget before giving up.

    Raises
    ------
    UnsolvableError
        If the derivative vanishes or the iteration budget is exhausted.
    """
    x = float(initial_guess)
    fx = float("nan")

    for iteration in range(1, max_iterations + 1):
        fx = func(x)
        if abs(fx) < tolerance:
            return RootResult(x, iteration, True, "newton")

        h = max(_MIN_STEP, abs(x) * _MIN_STEP)
        deriv = (func(x + h) - fx) / h
        logger.debug("Newton iter %s: x=%s value=%s deriv=%s", iteration, x, fx, deriv)
        if abs(deriv) < _MIN_DERIVATIVE:
            raise UnsolvableError(
                f"Derivative too small at iteration {iteration} "
                f"(x={x:.10g}, f(x)={fx:.6e}); cannot continue",
                iterations=iteration,
                last_guess=x,
                last_value=fx,
            )

        step = fx / deriv
        x -= step
        if abs(step) < tolerance:
            return RootResult(x, iteration, True, "newton")

    raise UnsolvableError(
        f"Failed to converge after {max_iterations} iterations "
        f"(x={x:.10g}, last f(x)={fx:.6e})",
        iterations=max_iterations,
        last_guess=x,
        last_value=fx,
    )
