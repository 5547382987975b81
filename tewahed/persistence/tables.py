"""SQLAlchemy table definitions for Tewahed Answers.

Only the tables comment threads touch are described here. Users,
questions and answers are owned by the wider forum; they are declared
with the columns this service reads.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", String(255), nullable=True),
    Column("display_name", String(255), nullable=True),
    Column("image", Text, nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE (owned by the forum)
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column(
        "author_id", String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ANSWERS TABLE (owned by the forum)
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "question_id",
        BigInteger,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=False),
    Column(
        "author_id", String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "question_id",
        BigInteger,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "answer_id",
        BigInteger,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    # Deleting a comment removes its whole subtree
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(question_id IS NULL) <> (answer_id IS NULL)",
        name="comment_single_root",
    ),
    CheckConstraint("char_length(content) BETWEEN 1 AND 2000", name="content_length"),
)

Index("idx_comments_question_id", comments_table.c.question_id)
Index("idx_comments_answer_id", comments_table.c.answer_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id", String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "target_type",
        Enum("question", "answer", "comment", name="like_target_type"),
        nullable=False,
    ),
    # Polymorphic reference, no FK
    Column("target_id", BigInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_like"),
)

Index("idx_likes_target", likes_table.c.target_type, likes_table.c.target_id)
