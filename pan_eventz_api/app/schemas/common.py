"""
Shared base model for content payloads.

Records are stored exactly as the clients send them, so request models
validate the fields the site depends on while letting any extra keys
through.  ``to_record`` turns a validated model back into the camelCase
dictionary the stores persist.
"""

from typing import Any, Dict

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base class for create and update payloads."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }

    def to_record(self, partial: bool = False) -> Dict[str, Any]:
        """Return the payload as a camelCase dictionary.

        With ``partial`` only the keys the client actually sent are
        included, which is what shallow-merge updates need.
        """
        return self.model_dump(by_alias=True, exclude_unset=partial)
