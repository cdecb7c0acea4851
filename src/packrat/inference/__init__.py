from packrat.inference.engine import infer

__all__ = ["infer"]
