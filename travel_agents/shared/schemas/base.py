"""
Base document model.

All request/response documents share camelCase wire names
(``tripTitle``, ``dayPlans``) while keeping snake_case attributes in Python.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for documents exchanged with clients and agents.

    Fields are populated either by attribute name or by camelCase alias,
    and serialize by alias when dumped with ``by_alias=True`` (FastAPI does
    this for response models).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
