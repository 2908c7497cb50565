from npuzzle.io.boardfile import dump_board, load_board, parse_board

__all__ = ["dump_board", "load_board", "parse_board"]
