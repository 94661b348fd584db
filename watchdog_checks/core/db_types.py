import uuid
from typing import Annotated
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import mapped_column


def generate_id() -> str:
    return str(uuid.uuid4())


# Alias - opaque string Primary Key (UUID4)
strpk = Annotated[str, mapped_column(String(36), primary_key=True, default=generate_id)]

# Aliases - Str
str_36 = Annotated[str, mapped_column(String(36))]
str_100 = Annotated[str, mapped_column(String(100))]

# Alias - aware date.
aware_datetime = Annotated[
    datetime,
    mapped_column(DateTime(timezone=True), nullable=False)
]
