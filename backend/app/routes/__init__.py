"""
CodeMate Backend — API Routes Package
=======================================

Route Inventory:
    - users.py:          POST  /api/users
                         PATCH /api/users/{id}
                         GET   /api/users/{id}
                         POST  /api/auth/lookup
    - projects.py:       POST   /api/projects
                         PATCH  /api/projects/{id}
                         GET    /api/users/{user_id}/projects
                         DELETE /api/projects/{id}?user_id=
    - conversations.py:  POST  /api/conversations
                         PATCH /api/conversations/{id}
                         GET   /api/projects/{project_id}/conversations
    - messages.py:       POST  /api/messages
                         GET   /api/conversations/{id}/messages
    - code_snippets.py:  POST   /api/code-snippets
                         PATCH  /api/code-snippets/{id}
                         GET    /api/conversations/{id}/code-snippets
                         DELETE /api/code-snippets/{id}?user_id=
    - health.py:         GET   /health
    - params.py:         bounded id path/query parameters

Routes stay thin: parse the request, call one service method, return its
result. Errors raised by services are translated by the handlers in main.py.
"""
