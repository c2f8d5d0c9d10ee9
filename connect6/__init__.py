"""
Connect-6 Game Package

A six-in-a-row engine on a 15x15 board with three AI difficulty tiers.
"""

from .board import Board, Move, MoveResult, Player, Position, RejectReason
from .game import Connect6, GameMode, GameStatus
from .strategies import Difficulty, create_strategy

__all__ = ['Board', 'Connect6', 'Difficulty', 'GameMode', 'GameStatus', 'Move',
           'MoveResult', 'Player', 'Position', 'RejectReason', 'create_strategy']
__version__ = '1.0.0'
