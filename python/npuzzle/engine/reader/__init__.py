from npuzzle.engine.reader.reader import PuzzleReader

__all__ = ["PuzzleReader"]
