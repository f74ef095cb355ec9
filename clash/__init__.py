"""
Clash - Simultaneous-turn combat engine

A deterministic engine for a small combat game where every participant
picks a move in secret and all moves are resolved at once.
The engine provides:
- Participant state (charges, boost, death)
- Counter-table resolution of each round
- Win detection (last participant standing)
- Boundary schemas for whatever collects the moves
"""

__version__ = "0.1.0"
