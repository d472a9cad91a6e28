"""Create users, projects, conversations, messages, code_snippets

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Initial CodeMate schema with native PostgreSQL ENUM types.
How:   Every cascade is declared on the foreign keys:
         users → projects → conversations → messages / code_snippets  (CASCADE)
         messages → code_snippets.message_id                          (SET NULL)

Rollback: downgrade() drops all tables and enum types (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

auth_provider = postgresql.ENUM("google", "facebook", "email", name="auth_provider", create_type=False)
coding_language = postgresql.ENUM(
    "javascript", "typescript", "python", "java", "cpp", "csharp", "go",
    "rust", "php", "ruby", "kotlin", "swift", "other",
    name="coding_language",
    create_type=False,
)
ai_model = postgresql.ENUM("claude-sonnet", "gemini-2.5-flash", "gpt-4", name="ai_model", create_type=False)
message_role = postgresql.ENUM("user", "assistant", name="message_role", create_type=False)

ENUM_TYPES = (auth_provider, coding_language, ai_model, message_role)


def _timestamp(name: str, comment: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
        comment=comment,
    )


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUM_TYPES:
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.Text(), nullable=False, comment="Unique login email"),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("auth_provider", auth_provider, nullable=False),
        sa.Column(
            "auth_provider_id",
            sa.Text(),
            nullable=False,
            comment="Subject id issued by the identity provider",
        ),
        sa.Column("preferred_coding_language", coding_language, nullable=False),
        sa.Column("preferred_ai_model", ai_model, nullable=False),
        _timestamp("created_at", "Registration time (UTC)"),
        _timestamp("updated_at", "Last profile change (UTC)"),
        sa.PrimaryKeyConstraint("id", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_unique"),
    )
    op.create_index("users_email_idx", "users", ["email"])
    op.create_index("users_auth_provider_idx", "users", ["auth_provider", "auth_provider_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False, comment="Owning user"),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("coding_language", coding_language, nullable=False),
        _timestamp("created_at", "Creation time (UTC)"),
        _timestamp("updated_at", "Last change (UTC); list ordering key"),
        sa.PrimaryKeyConstraint("id", name="projects_pkey"),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="projects_user_id_fk", ondelete="CASCADE"
        ),
    )
    op.create_index("projects_user_id_idx", "projects", ["user_id"])

    op.create_table(
        "conversations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=False),
        sa.Column(
            "user_id",
            sa.Integer(),
            nullable=False,
            comment="Owner; equals the owning user of the project at creation",
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("ai_model", ai_model, nullable=False),
        _timestamp("created_at", "Creation time (UTC)"),
        _timestamp("updated_at", "Last change (UTC); list ordering key"),
        sa.PrimaryKeyConstraint("id", name="conversations_pkey"),
        sa.ForeignKeyConstraint(
            ["project_id"], ["projects.id"], name="conversations_project_id_fk", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name="conversations_user_id_fk", ondelete="CASCADE"
        ),
    )
    op.create_index("conversations_project_id_idx", "conversations", ["project_id"])
    op.create_index("conversations_user_id_idx", "conversations", ["user_id"])

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("conversation_id", sa.Integer(), nullable=False),
        sa.Column("role", message_role, nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "metadata",
            postgresql.JSON(),
            nullable=True,
            comment="Free-form JSON object attached by the client",
        ),
        _timestamp("created_at", "Insertion time (UTC); chronological ordering key"),
        sa.PrimaryKeyConstraint("id", name="messages_pkey"),
        sa.ForeignKeyConstraint(
            ["conversation_id"],
            ["conversations.id"],
            name="messages_conversation_id_fk",
            ondelete="CASCADE",
        ),
    )
    op.create_index("messages_conversation_id_idx", "messages", ["conversation_id"])
    op.create_index("messages_created_at_idx", "messages", ["created_at"])

    op.create_table(
        "code_snippets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("conversation_id", sa.Integer(), nullable=False),
        sa.Column(
            "message_id",
            sa.Integer(),
            nullable=True,
            comment="Originating message; cleared when that message is deleted",
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("language", coding_language, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp("created_at", "Creation time (UTC); list ordering key"),
        _timestamp("updated_at", "Last edit (UTC)"),
        sa.PrimaryKeyConstraint("id", name="code_snippets_pkey"),
        sa.ForeignKeyConstraint(
            ["conversation_id"],
            ["conversations.id"],
            name="code_snippets_conversation_id_fk",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["message_id"], ["messages.id"], name="code_snippets_message_id_fk", ondelete="SET NULL"
        ),
    )
    op.create_index("code_snippets_conversation_id_idx", "code_snippets", ["conversation_id"])
    op.create_index("code_snippets_message_id_idx", "code_snippets", ["message_id"])


def downgrade() -> None:
    for table in ("code_snippets", "messages", "conversations", "projects", "users"):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_type in reversed(ENUM_TYPES):
        enum_type.drop(bind, checkfirst=True)
