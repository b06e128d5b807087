from .dicts import deep_merge

__all__ = ["deep_merge"]
