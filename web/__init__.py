"""
Web application package for the heuristic bot.

Provides a FastAPI REST endpoint for requesting a move for any FEN position.
"""
