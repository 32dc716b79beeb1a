"""In-memory collaborator implementations."""

from service_message_formatting.collaborators.in_memory.entity_directory import (
    Entity,
    InMemoryEntityDirectory,
)
from service_message_formatting.collaborators.in_memory.humanizer import DefaultHumanizer
from service_message_formatting.collaborators.in_memory.template_provider import (
    InMemoryTemplateProvider,
    plural_category,
)

__all__ = [
    "DefaultHumanizer",
    "Entity",
    "InMemoryEntityDirectory",
    "InMemoryTemplateProvider",
    "plural_category",
]
