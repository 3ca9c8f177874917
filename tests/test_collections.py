from __future__ import annotations

import pytest

from tests.support.harness import (
    BellaIndexError,
    BellaTypeError,
    BlArray,
    BlBool,
    BlNumber,
    eval_expr,
    n,
    prints,
    run_runtime_case,
    stmts,
)

ABC = n.array([n.numeral(1), n.numeral(2), n.numeral(3)])

SCENARIOS = [
    pytest.param(prints(ABC), ["[1, 2, 3]"], None, id="print-array"),
    pytest.param(prints(n.array([])), ["[]"], None, id="print-empty-array"),
    pytest.param(
        prints(n.array([n.boolean(True), n.array([n.numeral(0.5)])])),
        ["[true, [0.5]]"],
        None,
        id="print-nested-array",
    ),
    pytest.param(prints(n.subscript(ABC, n.numeral(1))), ["2"], None, id="subscript-middle"),
    pytest.param(prints(n.subscript(ABC, n.numeral(0))), ["1"], None, id="subscript-first"),
    pytest.param(
        stmts(n.vardecl("a", ABC), n.printstmt(n.subscript(n.ident("a"), n.numeral(5)))),
        None,
        BellaIndexError,
        id="subscript-past-end",
    ),
    pytest.param(prints(n.subscript(ABC, n.numeral(3))), None, BellaIndexError, id="subscript-at-length"),
    pytest.param(prints(n.subscript(ABC, n.numeral(-1))), None, BellaIndexError, id="subscript-negative"),
    pytest.param(prints(n.subscript(ABC, n.numeral(1.5))), None, BellaTypeError, id="subscript-fraction"),
    pytest.param(prints(n.subscript(ABC, n.boolean(True))), None, BellaTypeError, id="subscript-bool-index"),
    pytest.param(prints(n.subscript(n.numeral(3), n.numeral(0))), None, BellaTypeError, id="subscript-number"),
    pytest.param(
        stmts(
            n.fundecl("listy", ["x", "y", "z"], n.numeral(3)),
            n.printstmt(n.subscript(n.call("listy", [n.numeral(17), n.numeral(89), n.numeral(207)]), n.numeral(2))),
        ),
        None,
        BellaTypeError,
        id="subscript-number-from-call",
    ),
    pytest.param(
        prints(n.binary(ABC, "==", n.array([n.numeral(1), n.numeral(2), n.numeral(3)]))),
        ["true"],
        None,
        id="array-structural-equality",
    ),
    pytest.param(
        prints(n.binary(ABC, "!=", n.array([n.numeral(1), n.numeral(2)]))),
        ["true"],
        None,
        id="array-length-mismatch",
    ),
    pytest.param(
        prints(n.binary(n.array([n.numeral(1)]), "==", n.array([n.boolean(True)]))),
        ["false"],
        None,
        id="array-element-kind-mismatch",
    ),
    pytest.param(prints(n.binary(ABC, "==", n.numeral(1))), None, BellaTypeError, id="array-vs-number"),
    pytest.param(prints(n.binary(ABC, "+", ABC)), None, BellaTypeError, id="array-plus"),
]


@pytest.mark.parametrize("program, expectation, expected_exc", SCENARIOS)
def test_collection_scenarios(program, expectation, expected_exc) -> None:
    run_runtime_case(program, expectation, expected_exc)


def test_array_preserves_order_and_length() -> None:
    elements = [n.numeral(3), n.boolean(False), n.array([n.numeral(9)])]
    value = eval_expr(n.array(elements))

    assert value == BlArray([BlNumber(3.0), BlBool(False), BlArray([BlNumber(9.0)])])
    assert eval_expr(n.subscript(n.array(elements), n.numeral(1))) == BlBool(False)


def test_index_error_reports_index_and_length() -> None:
    with pytest.raises(BellaIndexError) as exc_info:
        eval_expr(n.subscript(ABC, n.numeral(7)))

    assert exc_info.value.index == 7
    assert exc_info.value.length == 3
    assert exc_info.value.kind == "IndexOutOfRange"


def test_integral_float_index_is_accepted() -> None:
    index = n.binary(n.numeral(4), "/", n.numeral(2))
    assert eval_expr(n.subscript(ABC, index)) == BlNumber(3.0)
