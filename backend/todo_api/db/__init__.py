from __future__ import annotations

"""
Persistence layer.

- session: engine, session factory, declarative Base, schema init
- store: the TodoStore boundary and its SQLAlchemy implementation
"""
