"""
Game configuration for the TicTacToe engine.
Fixed board geometry and minimax scoring constants.
"""


class GameConfig:
    """
    Configuration class for the game rules.
    The engine only supports the classic 3x3 board with 3 in a row.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # X always opens the game
    FIRST_PLAYER = "X"

    # ==================== AI SETTINGS ====================
    # A win scores WIN_SCORE - depth, a loss depth - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # Alpha-beta gives the same result as plain minimax, just faster
    USE_PRUNING = True
