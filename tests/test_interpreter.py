import io
import logging

import pytest

from ezscheme import Interpreter, interpret_code
from ezscheme.builtin import BuiltinRegistry, default_registry
from ezscheme.builtin.env_builtin import register_core
from ezscheme.errors import ParseError, UnboundVariableError
from ezscheme.evaluation.trace import LoggingTracer
from ezscheme.types import Builtin, Closure, Nil, Number, Symbol


def test_state_persists_across_calls(interp):
    interp.run("(define counter 0)")
    interp.run("(set! counter (+ counter 1))")
    interp.run("(set! counter (+ counter 1))")
    assert interp.eval("counter") == Number(2)


def test_run_discards_values_and_keeps_side_effects(interp, output):
    assert interp.run("(define (sq x) (* x x)) (write (sq 12)) (sq 3)") is None
    assert output.getvalue() == "144\n"


def test_eval_returns_last_value(interp):
    assert interp.eval("1 2 3") == Number(3)
    assert interp.eval("") is Nil


def test_interpret_single_expression(interp):
    from ezscheme.reader.parser import parse_one
    assert interp.interpret(parse_one("(+ 2 2)")) == Number(4)


def test_parse_errors_abort_whole_source(interp, output):
    with pytest.raises(ParseError):
        interp.run("(write 1) (write 2")
    assert output.getvalue() == ""


def test_evaluation_error_stops_remaining_forms(interp, output):
    with pytest.raises(UnboundVariableError):
        interp.run("(write 1) (set! nope 2) (write 3)")
    assert output.getvalue() == "1\n"


def test_interpret_code_uses_fresh_interpreter():
    buf = io.StringIO()
    interpret_code("(define x 5) (write x)", buf)
    interpret_code("(write x)", buf)
    assert buf.getvalue() == "5\n()\n"


def test_interpreters_do_not_share_globals():
    a, b = Interpreter(io.StringIO()), Interpreter(io.StringIO())
    a.run("(define car 1)")
    assert a.eval("car") == Number(1)
    assert isinstance(b.eval("car"), Builtin)


def test_custom_registry_gets_write(output):
    registry = BuiltinRegistry()
    registry.register("double", lambda args: Number(args[0].value * 2))
    interp = Interpreter(output, registry=registry)
    interp.run("(write (double 21))")
    assert output.getvalue() == "42\n"
    assert "write" not in registry
    assert interp.eval("car") is Nil


def test_registry_without_write_output():
    registry = register_core(BuiltinRegistry())
    chunks = []
    interp = Interpreter(chunks.append, registry=registry)
    interp.run("(write (cadr '(1 2)))")
    assert chunks == ["2\n"]


def test_strict_unbound_from_environment(monkeypatch):
    monkeypatch.setenv("EZSCHEME_STRICT_UNBOUND", "yes")
    with pytest.raises(UnboundVariableError):
        Interpreter().eval("missing")
    assert Interpreter(strict_unbound=False).eval("missing") is Nil


def test_strict_unbound_class_default(monkeypatch):
    monkeypatch.setattr(Interpreter, "DefaultStrictUnbound", True)
    with pytest.raises(UnboundVariableError):
        Interpreter().eval("missing")


class RecordingTracer:
    def __init__(self):
        self.evals = []
        self.applies = []

    def on_eval(self, expr, env):
        self.evals.append(expr)

    def on_apply(self, proc, args):
        self.applies.append((proc, args))


def test_tracer_sees_eval_and_apply(output):
    tracer = RecordingTracer()
    interp = Interpreter(output, tracer=tracer)
    interp.run("(define (inc x) (+ x 1)) (inc 1)")
    assert Symbol("inc") in tracer.evals
    procs = [p for p, _ in tracer.applies]
    assert isinstance(procs[0], Closure)
    assert procs[1].name == "+"
    assert tracer.applies[1][1] == [Number(1), Number(1)]


def test_logging_tracer(output, caplog):
    interp = Interpreter(output, tracer=LoggingTracer())
    with caplog.at_level(logging.DEBUG, logger="ezscheme.trace"):
        interp.eval("(+ 1 2)")
    messages = [r.getMessage() for r in caplog.records if r.name == "ezscheme.trace"]
    assert "eval (+ 1 2) [Pair]" in messages
    assert "apply #<builtin +> to (1 2)" in messages


def test_no_tracing_by_default(interp, caplog):
    with caplog.at_level(logging.DEBUG, logger="ezscheme.trace"):
        interp.eval("(+ 1 2)")
    assert not [r for r in caplog.records if r.name == "ezscheme.trace"]


def test_default_registry_is_per_interpreter():
    assert default_registry() is not default_registry()
    a, b = Interpreter(), Interpreter()
    assert a.registry is not b.registry
