import pytest

from elysp.errors import (
    ElyspArityError,
    ElyspNotCallable,
    ElyspTypeError,
    ElyspUnboundSymbol,
)
from elysp.evaluation.evaluator import apply, evaluate, evaluate_list, get_arg
from elysp.types.environment import Environment
from elysp.types.lambda_fn import Function, Macro
from elysp.types.native_fn import NativeFunction
from elysp.types.nil import Nil
from elysp.types.pair import Pair, make_list
from elysp.types.tags import ValueType

# -----------------------------------------------------
# Self-evaluating values and symbols
# -----------------------------------------------------


def test_self_evaluating_literals(env):
    assert evaluate(env, 1) == 1
    assert evaluate(env, "hello") == "hello"
    assert evaluate(env, Nil) is Nil
    assert evaluate(env, env) is env


def test_functions_and_macros_evaluate_to_themselves(env):
    fn = Function(Nil, make_list([1]), env)
    macro = Macro(Nil, make_list([1]), env)
    native = NativeFunction("noop", lambda e, a: Nil)
    assert evaluate(env, fn) is fn
    assert evaluate(env, macro) is macro
    assert evaluate(env, native) is native


def test_symbol_lookup(env, sym):
    env.add_variable(sym("x"), 42)
    assert evaluate(env, sym("x")) == 42


def test_unbound_symbol(env, sym):
    with pytest.raises(ElyspUnboundSymbol):
        evaluate(env, sym("never-defined"))


def test_nil_and_t_constants(env, sym):
    assert evaluate(env, sym("nil")) is Nil
    assert evaluate(env, sym("t")) is sym("t")


def test_non_elysp_value_is_rejected(env):
    with pytest.raises(ElyspTypeError):
        evaluate(env, 1.5)


# -----------------------------------------------------
# Application
# -----------------------------------------------------


def test_native_function_receives_unevaluated_args(env, sym):
    seen = []

    def capture(call_env, args):
        seen.append((call_env, args))
        return "done"

    env.add_variable(sym("capture"), NativeFunction("capture", capture))
    form = make_list([sym("capture"), sym("unbound-but-fine"), make_list([sym("nope")])])
    assert evaluate(env, form) == "done"
    call_env, args = seen[0]
    assert call_env is env
    assert args is form.cdr


def test_function_application_evaluates_args_left_to_right(run, capsys):
    run('(defn second (a b) b)')
    assert run('(second (print "one") (print "two"))') is Nil
    assert capsys.readouterr().out == "one\ntwo\n"


def test_anonymous_function_call(run):
    assert run("((fn (x) x) 2)") == 2


def test_function_body_returns_last_form(run):
    assert run("((fn (x) 1 2 (+ x 1)) 5)") == 6


def test_closure_uses_definition_environment_not_call_site(run):
    run("(define x 1)")
    run("(defn get-x () x)")
    run("(defn shadow (x) (get-x))")
    assert run("(shadow 99)") == 1


def test_closure_captures_environment_by_reference(run):
    run("(defn make-adder (n) (fn (x) (+ x n)))")
    run("(define add-two (make-adder 2))")
    assert run("(add-two 40)") == 42


def test_function_arity_mismatch(run):
    with pytest.raises(ElyspArityError):
        run("((fn (a b) a) 1)")
    with pytest.raises(ElyspArityError):
        run("((fn (a) a) 1 2)")


def test_list_as_callable_indexes(run):
    assert run("('(10 20 30) 0)") == 10
    assert run("('(10 20 30) 2)") == 30
    assert run("('(10 20 30) (+ 1 0))") == 20


def test_list_as_callable_out_of_range_is_nil(run):
    assert run("('(10 20 30) 3)") is Nil


def test_list_as_callable_requires_a_number(run):
    with pytest.raises(ElyspTypeError) as info:
        run('(\'(10 20) "zero")')
    assert info.value.expected is ValueType.NUM
    assert info.value.actual is ValueType.STRING


def test_list_as_callable_requires_one_argument(run):
    with pytest.raises(ElyspArityError):
        run("('(10 20) 0 1)")


@pytest.mark.parametrize("source", ["(1 2)", '("f" 1)', "(nil 1)"])
def test_not_callable(run, source):
    with pytest.raises(ElyspNotCallable):
        run(source)


def test_macro_is_not_callable_as_value(run):
    run("(defmacro m (x) x)")
    with pytest.raises(ElyspNotCallable):
        run("((car (list m)) 1)")


def test_apply_directly(env, sym):
    fn = Function(make_list([sym("a")]), make_list([sym("a")]), env)
    assert apply(env, fn, make_list([7])) == 7


def test_evaluate_list(env, sym):
    env.add_variable(sym("x"), 3)
    result = evaluate_list(env, make_list([1, sym("x"), "s"]))
    assert list(result) == [1, 3, "s"]
    assert evaluate_list(env, Nil) is Nil


def test_get_arg_evaluates_on_demand_and_checks_type(env, sym):
    env.add_variable(sym("x"), 3)
    args = make_list([sym("x"), "s"])
    assert get_arg(env, args, 0, ValueType.NUM) == 3
    assert get_arg(env, args, 1) == "s"
    with pytest.raises(ElyspTypeError):
        get_arg(env, args, 1, ValueType.NUM)
    with pytest.raises(ElyspArityError):
        get_arg(env, args, 2)


def test_pairs_are_shared_by_reference(run):
    run("(define xs (list 1 2))")
    run("(define ys xs)")
    xs = run("xs")
    xs.car = 100
    assert run("(car ys)") == 100
    assert isinstance(run("ys"), Pair)


def test_environment_value(run):
    e = run("(env)")
    assert isinstance(e, Environment)
    assert run("((fn (x) (env)) 1)").up is e
