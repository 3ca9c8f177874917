from __future__ import annotations

import pytest

from tests.support.harness import (
    BellaArityError,
    BellaRuntimeError,
    BellaStackOverflowError,
    BellaTypeError,
    BellaUnboundNameError,
    n,
    run_program,
    run_runtime_case,
    stmts,
)


def _fact_program(arg: float) -> object:
    body = n.conditional(
        n.binary(n.ident("k"), "<=", n.numeral(1)),
        n.numeral(1),
        n.binary(n.ident("k"), "*", n.call("fact", [n.binary(n.ident("k"), "-", n.numeral(1))])),
    )
    return stmts(n.fundecl("fact", ["k"], body), n.printstmt(n.call("fact", [n.numeral(arg)])))


SCENARIOS = [
    pytest.param(
        stmts(n.fundecl("five", [], n.numeral(5)), n.printstmt(n.call("five", []))),
        ["5"],
        None,
        id="nullary",
    ),
    pytest.param(
        stmts(n.fundecl("id", ["x"], n.ident("x")), n.printstmt(n.call("id", [n.numeral(2)]))),
        ["2"],
        None,
        id="identity",
    ),
    pytest.param(
        stmts(
            n.fundecl("plus", ["x", "y"], n.binary(n.ident("x"), "+", n.ident("y"))),
            n.printstmt(n.call("plus", [n.numeral(2), n.numeral(3)])),
        ),
        ["5"],
        None,
        id="two-params",
    ),
    pytest.param(
        stmts(
            n.fundecl("pick", ["want"], n.conditional(n.ident("want"), n.numeral(7), n.numeral(3))),
            n.printstmt(n.call("pick", [n.boolean(True)])),
            n.printstmt(n.call("pick", [n.boolean(False)])),
        ),
        ["7", "3"],
        None,
        id="conditional-body-called-twice",
    ),
    pytest.param(
        stmts(
            n.fundecl("listy", ["x", "y", "z"], n.array([n.ident("x"), n.ident("y"), n.ident("z")])),
            n.printstmt(n.subscript(n.call("listy", [n.numeral(17), n.numeral(89), n.numeral(207)]), n.numeral(2))),
        ),
        ["207"],
        None,
        id="subscript-call-result",
    ),
    pytest.param(
        stmts(n.fundecl("sq", ["v"], n.binary(n.ident("v"), "*", n.ident("v"))),
              n.printstmt(n.call("sq", [n.call("sq", [n.numeral(3)])]))),
        ["81"],
        None,
        id="nested-calls",
    ),
    pytest.param(_fact_program(5), ["120"], None, id="recursion"),
    pytest.param(
        stmts(n.fundecl("f", ["a"], n.numeral(2)), n.printstmt(n.call("f", []))),
        None,
        BellaArityError,
        id="arity-too-few",
    ),
    pytest.param(
        stmts(n.fundecl("f", [], n.numeral(2)), n.printstmt(n.call("f", [n.numeral(2), n.numeral(3)]))),
        None,
        BellaArityError,
        id="arity-too-many",
    ),
    pytest.param(
        stmts(n.fundecl("f", [], n.numeral(2)), n.printstmt(n.call("f", [n.numeral(1)]))),
        None,
        BellaArityError,
        id="nullary-given-one",
    ),
    pytest.param(
        stmts(n.vardecl("x", n.numeral(2)), n.printstmt(n.call("x", []))),
        None,
        BellaTypeError,
        id="call-non-function",
    ),
    pytest.param(
        stmts(n.fundecl("f", [], n.numeral(2)), n.printstmt(n.ident("f"))),
        None,
        BellaTypeError,
        id="print-function",
    ),
    pytest.param(
        stmts(n.fundecl("f", [], n.numeral(2)), n.printstmt(n.unary("-", n.ident("f")))),
        None,
        BellaTypeError,
        id="negate-function",
    ),
    pytest.param(
        stmts(
            n.vardecl("fourth", n.binary(n.numeral(5), "+", n.numeral(1))),
            n.fundecl(
                "listy",
                ["x", "y", "z"],
                n.array([n.ident("x"), n.ident("y"), n.ident("z"), n.ident("fifth")]),
            ),
            n.printstmt(n.subscript(n.call("listy", [n.numeral(17), n.numeral(89), n.numeral(207)]), n.numeral(3))),
        ),
        None,
        BellaUnboundNameError,
        id="body-reads-undeclared-name",
    ),
]


@pytest.mark.parametrize("program, expectation, expected_exc", SCENARIOS)
def test_function_scenarios(program, expectation, expected_exc) -> None:
    run_runtime_case(program, expectation, expected_exc)


def test_body_not_evaluated_at_declaration() -> None:
    program = stmts(n.fundecl("later", [], n.ident("undefined_yet")), n.printstmt(n.numeral(1)))
    assert run_program(program) == ["1"]


def test_arity_error_reports_direction() -> None:
    few = stmts(n.fundecl("f", ["a", "b"], n.numeral(0)), n.printstmt(n.call("f", [n.numeral(1)])))
    many = stmts(n.fundecl("g", ["a"], n.numeral(0)), n.printstmt(n.call("g", [n.numeral(1), n.numeral(2)])))

    with pytest.raises(BellaArityError) as few_info:
        run_program(few)
    with pytest.raises(BellaArityError) as many_info:
        run_program(many)

    assert few_info.value.too_few and few_info.value.expected == 2 and few_info.value.got == 1
    assert not many_info.value.too_few and many_info.value.got == 2
    assert "too few" in str(few_info.value)
    assert "too many" in str(many_info.value)


def test_arguments_evaluate_left_to_right_before_arity_check() -> None:
    # the unbound second argument fails first even though arity is also wrong
    program = stmts(
        n.fundecl("f", [], n.numeral(0)),
        n.printstmt(n.call("f", [n.numeral(1), n.ident("nope")])),
    )

    with pytest.raises(BellaUnboundNameError):
        run_program(program)


def test_function_equality_is_identity() -> None:
    program = stmts(
        n.fundecl("f", [], n.numeral(1)),
        n.fundecl("g", [], n.numeral(1)),
        n.vardecl("h", n.ident("f")),
        n.printstmt(n.binary(n.ident("f"), "==", n.ident("h"))),
        n.printstmt(n.binary(n.ident("f"), "==", n.ident("g"))),
    )

    assert run_program(program) == ["true", "false"]


def test_function_value_can_be_rebound_and_called() -> None:
    program = stmts(
        n.fundecl("double", ["v"], n.binary(n.ident("v"), "*", n.numeral(2))),
        n.vardecl("op", n.ident("double")),
        n.printstmt(n.call("op", [n.numeral(21)])),
    )

    assert run_program(program) == ["42"]


def test_callee_checked_before_arguments() -> None:
    program = stmts(
        n.vardecl("x", n.numeral(2)),
        n.printstmt(n.call("x", [n.ident("nope")])),
    )

    with pytest.raises(BellaTypeError) as exc_info:
        run_program(program)

    assert "not callable" in str(exc_info.value)


def _countdown_depth_program(depth: int, with_base_case: bool = True) -> object:
    recurse = n.binary(n.numeral(1), "+", n.call("f", [n.binary(n.ident("k"), "-", n.numeral(1))]))
    body = n.conditional(n.binary(n.ident("k"), "<=", n.numeral(0)), n.numeral(0), recurse) if with_base_case else recurse
    return stmts(n.fundecl("f", ["k"], body), n.printstmt(n.call("f", [n.numeral(depth)])))


@pytest.mark.parametrize("depth", [pytest.param(100, id="depth-100"), pytest.param(500, id="depth-500")])
def test_deep_recursion_completes(depth) -> None:
    assert run_program(_countdown_depth_program(depth)) == [str(depth)]


def test_unbounded_recursion_is_a_bella_error() -> None:
    with pytest.raises(BellaStackOverflowError) as exc_info:
        run_program(_countdown_depth_program(1, with_base_case=False))

    assert isinstance(exc_info.value, BellaRuntimeError)
    assert exc_info.value.kind == "StackOverflow"
    assert "too deep" in str(exc_info.value)
