"""
CodeMate Backend — Services Layer
===================================

What:  Business rules between the routes (HTTP) and the models (persistence).
How:   One stateless service class per entity, exposed as a module-level
       singleton. Every method takes the request's AsyncSession first and
       returns Pydantic response schemas, never ORM rows.

Service Inventory:
    - AccessRules:         existence and ownership checks (access.py)
    - UserService:         register, update, lookup by id / by auth identity
    - ProjectService:      create, update, list per user, owner-only delete
    - ConversationService: create (owner-only), update, list per project
    - MessageService:      append, list in chronological order
    - CodeSnippetService:  create, update, list per conversation, owner-only delete

Transactions:
    Services only flush. The request-scoped session from get_db_session()
    commits after the route returns and rolls back if anything raised.
"""
