from backend.engine.gamevalidator.validator import InputValidator

__all__ = ["InputValidator"]
