"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations.
No runtime imports from app.infrastructure.
"""

from app.application.interfaces.repositories import ITagRepository

__all__ = ["ITagRepository"]
