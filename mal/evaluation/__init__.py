from mal.evaluation.evaluator import evaluate
from mal.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
