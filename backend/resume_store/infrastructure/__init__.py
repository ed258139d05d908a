"""Infrastructure: engine/session management, logging setup and the SQLAlchemy repositories.

Invariants:
    - One async engine per DatabaseSessionManager, owned by the process wiring
    - All sessions are AsyncSession with expire_on_commit=False
"""
