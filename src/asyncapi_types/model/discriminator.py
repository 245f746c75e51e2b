"""Discriminator Object."""

from typing import Dict

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel


class Discriminator(AsyncAPIModel):
    """Object form of a polymorphic schema hint.

    AsyncAPI schemas normally carry the discriminator as a bare property
    name string; the object form (with an explicit value-to-schema mapping)
    is accepted as well.
    """
    property_name: str
    mapping: Dict[str, str] = Field(default_factory=dict)
