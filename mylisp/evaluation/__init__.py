from mylisp.evaluation.evaluator import evaluate
from mylisp.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
