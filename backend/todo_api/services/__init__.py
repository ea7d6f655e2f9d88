from __future__ import annotations

"""
Service layer.

- todos: TodoService, the business operations behind /api/todos
- statsig_client: optional backend analytics events
"""
