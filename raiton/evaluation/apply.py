"""Application engine for Raiton.

This module centralizes function application semantics for the evaluator:
- Partial application: fewer arguments than parameters bind the leading
  parameters in a clone of the closure env and return a new Function.
- Full application: a fresh frame enclosing the closure env, body evaluated there.
- Over-application is an arity error.
- Builtins receive the evaluator and the evaluated argument list.

Builtins such as `map` come back through here (via Evaluator.call) to run
user functions, so there is one place that decides what a call means.
"""

from __future__ import annotations

import logging

from raiton.errors import RaitonArityError
from raiton.types.function import Function
from raiton.types.values import Builtin

logger = logging.getLogger(__name__)


def apply_function(evaluator, fn: Function, args: list):
    """Apply a Raiton Function to already-evaluated arguments."""
    provided = len(args)
    arity = fn.arity

    if provided < arity:
        partial = fn.partial(args)
        logger.debug("partial application: %d of %d arguments bound", provided, arity)
        return partial

    if provided == arity:
        return evaluator.evaluate_in(fn.extend_env(args), fn.body)

    raise RaitonArityError(f"function expects {arity} arguments, but got {provided}")


def apply(evaluator, head, args: list):
    """Apply a Function or Builtin; any other value is the result unchanged."""
    if isinstance(head, Function):
        return apply_function(evaluator, head, args)
    if isinstance(head, Builtin):
        logger.debug("calling builtin %s with %d arguments", head.name, len(args))
        return head(evaluator, args)
    return head
