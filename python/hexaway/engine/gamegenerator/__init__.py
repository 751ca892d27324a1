from hexaway.engine.gamegenerator.assembler import LevelAssembler
from hexaway.engine.gamegenerator.backward import BackwardBuilder
from hexaway.engine.gamegenerator.generator import LevelGenerator
from hexaway.engine.gamegenerator.simple import SimpleBuilder

__all__ = ["BackwardBuilder", "LevelAssembler", "LevelGenerator", "SimpleBuilder"]
