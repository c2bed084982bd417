"""UDP game server for a multiplayer snake arena: game rules, wire messages and transport."""

__version__ = "0.1.0"