"""User table and mapping configuration"""
from sqlalchemy import Column, Integer, String, Table
from app.db.base import mapper_registry, metadata
from app.models.user import User

FIRSTNAME_MAX_LENGTH = 50
LASTNAME_MAX_LENGTH = 255

# Largest value a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("firstname", String(FIRSTNAME_MAX_LENGTH), unique=True, nullable=False),
    Column("lastname", String(LASTNAME_MAX_LENGTH), unique=True, nullable=False),
)

mapper_registry.map_imperatively(User, users_table)
