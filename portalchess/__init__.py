"""Chess variant configurations with custom pieces and portals."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "config", "cooldown", "graph", "pieces", "stack"]