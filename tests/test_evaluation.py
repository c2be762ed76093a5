import pytest

from ezscheme.errors import (
    ArityError, BuiltinError, ParseError, UnboundVariableError, UnknownFormError,
)
from ezscheme.evaluation.evaluator import Evaluator, evaluate
from ezscheme.interpreter import Interpreter
from ezscheme.printer import to_repr
from ezscheme.reader.parser import parse_one
from ezscheme.types import (
    FALSE, TRUE, Closure, Environment, Nil, Number, String, Symbol, from_list,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", "42"),
        ("#t", "#t"),
        ('"text"', "text"),
        ("'sym", "sym"),
        ("'(1 . 2)", "(1 . 2)"),
        ("(quote (a b))", "(a b)"),
        ("(if 0 'a 'b)", "a"),
        ("(if '() 'a 'b)", "a"),
        ("(if #f 'a 'b)", "b"),
        ("(if #f 'a)", "#f"),
        ("(let ((x 1) (y 2)) (+ x y))", "3"),
        ("((lambda (x y) (+ x y)) 1 2)", "3"),
        ("(cond (#f 1) (#f 2) (else 3))", "3"),
        ("(cond (#f 1) ((= 1 1) 'second 'last))", "last"),
        ("(cond (#f 1))", "#f"),
        ("(begin 1 2 3)", "3"),
        ("((lambda (a) a) 1 2)", "1"),
        ("(+ 1 2 3)", "6"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 3 2)", "#f"),
        ("(and)", "#t"),
        ("(or)", "#f"),
        ("(and 1 2 #f 3)", "#f"),
        ("(or #f #f 5)", "5"),
    ]
)
def test_expressions(interp, source, expected):
    assert to_repr(interp.eval(source)) == expected


def test_define_and_set_return_no_value(interp):
    assert interp.eval("(define x 1)") is Nil
    assert interp.eval("(set! x 2)") is Nil
    assert interp.eval("x") == Number(2)


def test_define_procedure_sugar(interp):
    interp.run("(define (double n) (+ n n))")
    proc = interp.global_env.lookup(Symbol("double"))
    assert isinstance(proc, Closure)
    assert proc.params == [Symbol("n")]
    assert interp.eval("(double 21)") == Number(42)


def test_let_bindings_are_evaluated_in_enclosing_environment(interp):
    assert interp.eval("(define x 10) (let ((x 1) (y x)) y)") == Number(10)


def test_let_is_the_same_as_lambda_application(interp):
    let_result = interp.eval("(let ((a 3) (b 4)) (* a b) (- b a))")
    lambda_result = interp.eval("((lambda (a b) (* a b) (- b a)) 3 4)")
    assert let_result == lambda_result == Number(1)


def test_else_clause_must_be_last(interp):
    with pytest.raises(ParseError, match="ELSE clause is not last"):
        interp.eval("(cond (#f 1) (else 2) (#t 3))")


def test_cond_clause_bodies_run_in_order(interp, output):
    result = interp.eval("(cond (#t (write 1) (write 2) 3))")
    assert output.getvalue() == "1\n2\n"
    assert result == Number(3)


def test_pair_mutation_is_visible_through_aliases(interp):
    interp.run("(define p (cons 1 2)) (define q p) (set-car! p 9)")
    assert interp.eval("(car q)") == Number(9)
    interp.run("(set-cdr! q '(3))")
    assert to_repr(interp.eval("p")) == "(9 3)"


def test_quoted_data_can_be_mutated(interp):
    interp.run("(define l '(1 2 3)) (set-car! (cdr l) 'two)")
    assert to_repr(interp.eval("l")) == "(1 two 3)"


def test_closure_keeps_outer_call_bindings(interp):
    interp.run("""
        (define (make-adder n)
          (lambda (x) (+ x n)))
        (define add5 (make-adder 5))
        (define add7 (make-adder 7))
    """)
    assert interp.eval("(add5 1)") == Number(6)
    assert interp.eval("(add7 1)") == Number(8)


def test_closure_state_survives_between_calls(interp):
    interp.run("""
        (define (make-counter)
          (let ((n 0))
            (lambda () (set! n (+ n 1)) n)))
        (define c (make-counter))
        (c)
        (c)
    """)
    assert interp.eval("(c)") == Number(3)


def test_recursion(interp):
    interp.run("""
        (define (fact n)
          (if (= n 0) 1 (* n (fact (- n 1)))))
        (define (fib n)
          (cond ((< n 2) n)
                (else (+ (fib (- n 1)) (fib (- n 2))))))
    """)
    assert interp.eval("(fact 20)") == Number(2432902008176640000)
    assert interp.eval("(fib 15)") == Number(610)


def test_operands_evaluate_left_to_right(interp, output):
    interp.run("(list (write 1) (write 2) (write 3))")
    assert output.getvalue() == "1\n2\n3\n"


def test_set_of_unbound_name(interp):
    with pytest.raises(UnboundVariableError):
        interp.eval("(set! undefined-name 1)")


def test_too_few_arguments(interp):
    with pytest.raises(ArityError) as exc:
        interp.eval("((lambda (a b) a) 1)")
    assert (exc.value.expected, exc.value.provided) == (2, 1)
    assert "Unassigned parameter" in str(exc.value)


def test_unbound_read_is_no_value_by_default(interp):
    assert interp.eval("no-such-variable") is Nil


def test_unbound_read_in_strict_mode():
    with pytest.raises(UnboundVariableError):
        Interpreter(strict_unbound=True).eval("no-such-variable")


@pytest.mark.parametrize(
    "source, error",
    [
        ("(1 2)", UnknownFormError),
        ("(no-such-procedure 1)", UnknownFormError),
        ("(+ 1 . 2)", UnknownFormError),
        ("(begin)", ParseError),
        ("(quote)", ParseError),
        ("(if #t)", ParseError),
        ("(lambda (x))", ParseError),
        ("(lambda (x . rest) x)", ParseError),
        ("(lambda (1) 1)", ParseError),
        ("(let ((x)) x)", ParseError),
        ("(define 5 1)", ParseError),
        ("(set! 5 1)", ParseError),
        ("(car 1)", BuiltinError),
    ]
)
def test_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_evaluating_nil_is_unknown_form():
    with pytest.raises(UnknownFormError):
        evaluate(Nil, Environment())


def test_evaluate_with_plain_environment():
    env = Environment()
    expr = parse_one("((lambda (x) (if x 'yes 'no)) #f)")
    assert evaluate(expr, env) == Symbol("no")


def test_special_forms_take_precedence_over_bindings(interp):
    interp.run("(define if (lambda (a b c) 'shadowed))")
    assert interp.eval("(if #t 1 2)") == Number(1)


def test_self_evaluating_values_are_returned_as_is():
    ev = Evaluator()
    s = String("x")
    assert ev.evaluate(s, Environment()) is s
    assert ev.evaluate(TRUE, Environment()) is TRUE


def test_apply_directly(interp):
    ev = interp.evaluator
    plus = interp.global_env.lookup(Symbol("+"))
    assert ev.apply(plus, [Number(1), Number(2)]) == Number(3)
    closure = interp.eval("(lambda (x) (cons x x))")
    assert to_repr(ev.apply(closure, [Number(4)])) == "(4 . 4)"
    with pytest.raises(UnknownFormError):
        ev.apply(Number(1), [])


def test_desugared_forms_are_not_written_back(interp):
    expr = parse_one("(let ((x 1)) x)")
    before = to_repr(expr)
    interp.interpret(expr)
    assert to_repr(expr) == before
    assert expr == from_list([Symbol("let"), from_list([from_list([Symbol("x"), Number(1)])]), Symbol("x")])


def test_deep_recursion_hits_host_limit(interp):
    interp.run("(define (down n) (if (= n 0) 0 (+ 1 (down (- n 1)))))")
    with pytest.raises(RecursionError):
        interp.eval("(down 100000)")
    assert interp.eval("(down 50)") == Number(50)


def test_false_is_not_zero(interp):
    assert interp.eval("(eqv? 0 #f)") == FALSE
