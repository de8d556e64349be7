"""
Pydantic schemas for stars.

A star is a named reference to something worth remembering: a
unique ``name``, a free-form ``description`` and a ``url``.  The URL
is stored as given and is not validated.
"""

from pydantic import BaseModel, Field


class StarForm(BaseModel):
    """Form payload accepted by ``POST /stars`` and ``PUT /stars/{name}``.

    Absent form values arrive as empty strings.
    """

    name: str = Field("", description="Unique name of the star; also its path key")
    description: str = Field("", description="Free-form description")
    url: str = Field("", description="Reference URL")


class StarRead(BaseModel):
    """Schema for reading a star."""

    name: str = ""
    description: str = ""
    url: str = ""
