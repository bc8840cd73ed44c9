"""
Arcade - Deterministic puzzle game engines

A small arcade of independent turn/tick-based games. Each game is a pure
state machine: an initial state, a closed set of actions, and a reducer
mapping (state, action) to a new state. The package provides:
- Engines for 2048, Snake, Tic-Tac-Toe (Classic + Bolt) and Lights Out
- An optimal Lights Out solver
- Sessions that own the current state and persist best scores
- A REST API and a terminal CLI on top of sessions
"""

__version__ = "0.1.0"
