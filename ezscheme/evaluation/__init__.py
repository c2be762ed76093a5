from ezscheme.evaluation.evaluator import Evaluator, evaluate
from ezscheme.evaluation.trace import Tracer, LoggingTracer

__all__ = ["Evaluator", "evaluate", "Tracer", "LoggingTracer"]
