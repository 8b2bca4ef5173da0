"""Pydantic models for exporting media types as plain data.

These models give a validated, serializable view of a media type's
components, suitable for JSON output or for storing alongside other
Pydantic models.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .registration_tree import RegistrationTree


class MediaTypeModel(BaseModel):
    """Plain data view of a media type.

    :param type: Top-level type, e.g. ``application``
    :type type: str
    :param registration_tree: Registration tree of the subtype
    :type registration_tree: RegistrationTree
    :param sub_type: Subtype with the tree prefix removed
    :type sub_type: str
    :param suffix: Structured syntax suffix, if any
    :type suffix: Optional[str]
    :param parameters: Parameters keyed by lowercase name
    :type parameters: Dict[str, str]
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1, description="Top-level type")
    registration_tree: RegistrationTree = Field(
        RegistrationTree.STANDARDS, description="Subtype registration tree"
    )
    sub_type: str = Field(..., description="Subtype without tree prefix")
    suffix: Optional[str] = Field(None, description="Structured syntax suffix")
    parameters: Dict[str, str] = Field(
        default_factory=dict, description="Parameters keyed by lowercase name"
    )


__all__ = ["MediaTypeModel"]
