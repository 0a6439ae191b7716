from slidehint.engine.hints.advisor import HINT_TYPES, Hint, HintAdvisor

__all__ = ["HINT_TYPES", "Hint", "HintAdvisor"]
