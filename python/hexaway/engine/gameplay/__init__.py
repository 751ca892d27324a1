from hexaway.engine.gameplay.game import MoveOutcome, Replay
from hexaway.engine.gameplay.slide import SlideResult, blocker_of, resolve_slide, slide_path

__all__ = ["MoveOutcome", "Replay", "SlideResult", "blocker_of", "resolve_slide", "slide_path"]
