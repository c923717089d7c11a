from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
