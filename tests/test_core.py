import pytest

from meshkit.core import (
    AllocationException,
    GLException,
    InvalidInputException,
    IOException,
    SolverException,
    TopologyException,
)


@pytest.mark.parametrize(
    "exc_type, base",
    [
        (InvalidInputException, ValueError),
        (SolverException, RuntimeError),
        (AllocationException, OverflowError),
        (TopologyException, RuntimeError),
        (IOException, OSError),
        (GLException, RuntimeError),
    ],
)
def test_exceptions_are_caught_by_builtin_base(exc_type, base):
    with pytest.raises(base) as excinfo:
        raise exc_type("something failed")
    assert type(excinfo.value) is exc_type
    assert excinfo.value.args == ("something failed",)


@pytest.mark.parametrize(
    "exc_type",
    [
        InvalidInputException,
        SolverException,
        AllocationException,
        TopologyException,
        GLException,
    ],
)
def test_exception_message_is_kept(exc_type):
    message = "Input is not a pure triangle mesh!"
    assert str(exc_type(message)) == message


def test_io_exception_message_is_kept():
    message = "Failed to load texture file: missing.png"
    assert IOException(message).args == (message,)


def test_solver_and_topology_errors_are_distinct():
    solver_error = SolverException("no solution")
    topology_error = TopologyException("bad topology")
    assert not isinstance(solver_error, TopologyException)
    assert not isinstance(topology_error, SolverException)
    assert str(solver_error) == "no solution"
    assert str(topology_error) == "bad topology"