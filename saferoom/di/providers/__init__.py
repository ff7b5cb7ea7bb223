from .analysis_provider import AnalysisProvider


__all__ = [
    "AnalysisProvider",
]
