from .classifier import NoiseFilter, NoiseSplit, classify

__all__ = ["NoiseFilter", "NoiseSplit", "classify"]
