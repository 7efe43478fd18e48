"""
Helpers for calling registered functions with a shared set of arguments.

"""

from __future__ import annotations

import inspect
from typing import Any, Callable


def filter_function_parameters(
    func: Callable, provided_params: dict[str, Any]
) -> dict[str, Any]:
    """
    Filter provided parameters down to those a function accepts.

    Parameters that are not in the signature of ``func``, or whose value is
    None, are dropped so that the function's own defaults apply.

    Parameters
    ----------
    func : Callable
        The function whose parameters to filter
    provided_params : dict[str, Any]
        Parameters provided by the caller

    Returns
    -------
    dict[str, Any]
        Filtered function arguments ready for function call
    """
    sig = inspect.signature(func)
    return {
        k: v for k, v in provided_params.items() if k in sig.parameters and v is not None
    }
