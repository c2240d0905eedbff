"""Core fuel logic layer.

Subpackages:
- planning: fuel plan generation, next intake selection, program suggestion
- display: progress and next-intake badge rules
- session: elapsed-time tracking for an active session
- reporting: session summary and recommendations
"""
__all__ = ["planning", "display", "session", "reporting"]
