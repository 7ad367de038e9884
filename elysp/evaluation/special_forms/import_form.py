from __future__ import annotations

import logging

from elysp import SExpression, LispValue
from elysp.evaluation.arguments import check_arity
from elysp.evaluation.evaluator import get_arg
from elysp.types.environment import Environment
from elysp.types.nil import Nil
from elysp.types.tags import ValueType

logger = logging.getLogger(__name__)


def import_form(env: Environment, args: SExpression) -> LispValue:
    """
    Usage:
        (import "path/to/module.ely")

    Evaluates the file in a child of a freshly built default environment, then
    copies every binding the module made at top level into `env`. There is no
    aliasing or selective import: the namespaces are merged flat.
    """
    check_arity(args, 1, name="import")
    path = get_arg(env, args, 0, ValueType.STRING, name="import")

    # Lazy import to avoid circular imports
    from elysp.modules.package_loader import load_module
    module_env = load_module(path, env.symbols)

    # The frame lists newest first; re-add oldest first to keep the same shadowing
    bindings = list(module_env.bindings())
    for sym, value in reversed(bindings):
        env.add_variable(sym, value)
    logger.debug("imported %d bindings from %s", len(bindings), path)
    return Nil
