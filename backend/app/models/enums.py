"""
CodeMate Backend — Enumerated Value Sets
==========================================

What:  Python enums for every constrained column, plus SQLAlchemy type factories.
Why:   The same value sets are enforced in three places (Pydantic input schemas,
       ORM columns, database types); defining them once keeps them in lockstep.
How:   str-based Enums so values serialize to JSON as plain strings. Columns
       store the enum VALUE (e.g. "gemini-2.5-flash"), not the member name.

Store-level enforcement:
    PostgreSQL: native ENUM types (auth_provider, coding_language, ai_model, message_role)
    SQLite:     CHECK constraints generated by SQLAlchemy (create_constraint=True)
"""

import enum
from typing import List, Type

from sqlalchemy import Enum as SAEnum


class AuthProvider(str, enum.Enum):
    GOOGLE = "google"
    FACEBOOK = "facebook"
    EMAIL = "email"


class CodingLanguage(str, enum.Enum):
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"
    CSHARP = "csharp"
    GO = "go"
    RUST = "rust"
    PHP = "php"
    RUBY = "ruby"
    KOTLIN = "kotlin"
    SWIFT = "swift"
    OTHER = "other"


class AIModel(str, enum.Enum):
    CLAUDE_SONNET = "claude-sonnet"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GPT_4 = "gpt-4"


class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


def _values(enum_cls: Type[enum.Enum]) -> List[str]:
    return [member.value for member in enum_cls]


def _column_type(enum_cls: Type[enum.Enum], name: str) -> SAEnum:
    # A fresh instance per column: SchemaType objects attach their CHECK
    # constraint to the first table they are bound to
    return SAEnum(
        enum_cls,
        name=name,
        values_callable=_values,
        create_constraint=True,
        validate_strings=True,
    )


def auth_provider_type() -> SAEnum:
    return _column_type(AuthProvider, "auth_provider")


def coding_language_type() -> SAEnum:
    return _column_type(CodingLanguage, "coding_language")


def ai_model_type() -> SAEnum:
    return _column_type(AIModel, "ai_model")


def message_role_type() -> SAEnum:
    return _column_type(MessageRole, "message_role")
