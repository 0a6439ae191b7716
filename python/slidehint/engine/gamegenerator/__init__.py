from slidehint.engine.gamegenerator.generator import PRESETS, GameGenerator

__all__ = ["GameGenerator", "PRESETS"]
