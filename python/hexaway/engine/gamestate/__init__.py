from hexaway.engine.gamestate.state import BuildPhase, BuildResult, BuildState

__all__ = ["BuildPhase", "BuildResult", "BuildState"]
