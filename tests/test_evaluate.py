"""Tests for the numtower-eval command line entry point."""

import pytest

from numtower.algebras import CDBL, DBL_MAT, ODBL_TEN, QDBL_VEC
from numtower.config import configure
from numtower.evaluate import Kind, evaluate, main, select_algebra


@pytest.fixture(autouse=True)
def reset_settings():
    configure(None)
    yield
    configure(None)


def test_select_algebra() -> None:
    assert select_algebra(Kind.COMPLEX, 0) is CDBL
    assert select_algebra(Kind.QUATERNION, 1) is QDBL_VEC
    assert select_algebra("real", 2) is DBL_MAT
    assert select_algebra(Kind.OCTONION, 1, tensor=True) is ODBL_TEN
    with pytest.raises(ValueError):
        select_algebra(Kind.REAL, 3)


def test_binary_operations_write_a_result() -> None:
    assert evaluate(Kind.REAL, "exp", "0") == "1.0"
    assert evaluate(Kind.COMPLEX, "conjugate", "(1,2)") == "(1.0,-2.0)"
    assert evaluate(Kind.REAL, "negate", "[[1,2],[3,4]]", tensor=True) == "[[-1.0,-2.0],[-3.0,-4.0]]"


def test_norm_and_det_are_scalars() -> None:
    assert evaluate(Kind.COMPLEX, "norm", "(3,4)") == "5.0"
    assert evaluate(Kind.QUATERNION, "norm", "[(1,1,1,1),0]") == "2.0"
    assert float(evaluate(Kind.REAL, "det", "[[1,2],[3,4]]")) == pytest.approx(-2.0)


def test_queries_and_fills() -> None:
    assert evaluate(Kind.REAL, "is_unity", "[[1,0],[0,1]]") == "true"
    assert evaluate(Kind.COMPLEX, "is_zero", "(0,1)") == "false"
    assert evaluate(Kind.REAL, "zero", "[5,6]") == "[0.0,0.0]"


@pytest.mark.parametrize(
    ("op", "literal"),
    [
        ("frobnicate", "1"),
        ("_store", "1"),
        ("power", "2"),
        ("exp", "[[[1,2],[3,4]],[[5,6],[7,8]]]"),
    ],
)
def test_rejected_requests(op: str, literal: str) -> None:
    with pytest.raises(ValueError):
        evaluate(Kind.REAL, op, literal)


def test_main_prints_result(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--kind", "complex", "--op", "conjugate", "(1,2)"])
    assert capsys.readouterr().out.strip() == "(1.0,-2.0)"


def test_main_reads_settings(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("log_level: WARNING\ntaylor_terms:\n  exp: 2\n")
    main(["--op", "exp", "--config-path", str(config_path), "[[1,0],[0,1]]"])
    assert capsys.readouterr().out.strip() == "[[2.0,0.0],[0.0,2.0]]"


def test_main_rejects_unknown_kind() -> None:
    with pytest.raises(SystemExit):
        main(["--kind", "sedenion", "--op", "exp", "1"])
