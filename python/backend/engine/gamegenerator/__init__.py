from backend.engine.gamegenerator.generator import SequenceGenerator

__all__ = ["SequenceGenerator"]
