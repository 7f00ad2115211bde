"""
main.py — Run your Arena Sync server
====================================

This is the entry point for running the server from code.
Adjust the settings below (or point to a JSON file) and run.

    python main.py

The runner will:
  1. Listen for WebSocket clients
  2. Track every player that joins
  3. Award points when a player reaches the collectible
  4. Broadcast every change to the other players

Press Ctrl+C to stop.
"""

from arena_sync import ArenaRunner, load_settings

# ── Configuration ──
# Anything left out falls back to arena.json, ARENA_* variables or defaults
overrides = {
    "host": "127.0.0.1",
    "port": 3000,
    "log_level": "INFO",
}

# ── Create the runner and serve ──
settings = load_settings("arena.json", overrides=overrides)
runner = ArenaRunner(settings)
runner.run()
