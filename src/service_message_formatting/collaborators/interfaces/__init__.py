"""Collaborator interfaces."""

from service_message_formatting.collaborators.interfaces.entity_directory import IEntityDirectory
from service_message_formatting.collaborators.interfaces.humanizer import DayRelation, IHumanizer
from service_message_formatting.collaborators.interfaces.template_provider import (
    ITemplateProvider,
    TemplateLookup,
)

__all__ = [
    "DayRelation",
    "IEntityDirectory",
    "IHumanizer",
    "ITemplateProvider",
    "TemplateLookup",
]
