from packrat.evaluator.evaluator import Evaluator

__all__ = ["Evaluator"]
