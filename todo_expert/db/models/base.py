"""
➡️ But : Propriétés communes de toutes les tables (identifiant + horodatage).

updated_at sert de "date de dernière modification" : la liste des todos est triée dessus.
"""

from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional

def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, description="Date de création (UTC)")
    updated_at: datetime = Field(default_factory=utc_now, description="Date de dernière modification (UTC)")
