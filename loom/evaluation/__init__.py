from loom.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
