from backend.engine.gameplayback.playback import PlaybackBusyError, PlaybackScheduler

__all__ = ["PlaybackBusyError", "PlaybackScheduler"]
