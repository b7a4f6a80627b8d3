import pytest
from hypothesis import given, settings, strategies as st

from raiton import errors, evaluate, new_environment, parse
from raiton.types.function import Function


def test_partial_returns_function_of_remaining_parameters(run):
    run("fn sum3 a b c { (add a (add b c)) }")
    partial = run("(sum3 1)")
    assert isinstance(partial, Function)
    assert [str(p) for p in partial.parameters] == ["b", "c"]
    assert partial.inspect() == "\\b c { (add a (add b c)) }"


def test_partial_chain(run):
    run("fn sum3 a b c { (add a (add b c)) }")
    assert run("(((sum3 1) 2) 3)").inspect() == "6"
    assert run("((sum3 1 2) 3)").inspect() == "6"
    assert run("((sum3 1) 2 3)").inspect() == "6"


def test_partials_do_not_share_bindings(run):
    run("fn pair a b { [a b] }")
    run("first_one: (pair 1)")
    run("first_two: (pair 2)")
    assert run("(first_one 10)").inspect() == "[1 10]"
    assert run("(first_two 10)").inspect() == "[2 10]"


def test_partial_keeps_closure_bindings(run):
    run("base: 100")
    run("fn offset a b { (add base (add a b)) }")
    run("inc: (offset 1)")
    run("base: 200")
    assert run("(inc 1)").inspect() == "202"


def test_partial_used_with_map(run):
    run("fn scale k x { (mul k x) }")
    assert run("(map (scale 3) [1 2 3])").inspect() == "[3 6 9]"


def test_over_application_of_partial(run):
    run("fn pair a b { [a b] }")
    with pytest.raises(errors.RaitonArityError, match="function expects 1 arguments, but got 2"):
        run("((pair 1) 2 3)")


int64s = st.integers(min_value=-(2 ** 31), max_value=2 ** 31)


@settings(max_examples=50, deadline=None)
@given(args=st.lists(int64s, min_size=1, max_size=5), data=st.data())
def test_split_application_matches_full_application(args, data):
    """((f a1..ak) ak+1..an) gives the same value as (f a1..an)."""
    env = new_environment()
    names = [f"p{i}" for i in range(len(args))]
    body = "[" + " ".join(names) + "]"
    evaluate(env, parse(f"fn f {' '.join(names)} {{ {body} }}"))

    split = data.draw(st.integers(min_value=0, max_value=len(args)))
    literals = [str(a) for a in args]
    head = " ".join(["f", *literals[:split]])
    tail = " ".join(literals[split:])

    full = evaluate(env, parse(f"(f {' '.join(literals)})"))
    staged = evaluate(env, parse(f"(({head}) {tail})"))
    assert staged == full
    assert full.inspect() == "[" + " ".join(literals) + "]"
