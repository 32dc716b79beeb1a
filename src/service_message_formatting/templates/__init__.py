"""Template keys, the positional formatter and the default string table."""

from service_message_formatting.templates.formatting import format_with_argument_ranges
from service_message_formatting.templates.keys import TemplateKey
from service_message_formatting.templates.strings_en import ENGLISH_STRINGS

__all__ = ["ENGLISH_STRINGS", "TemplateKey", "format_with_argument_ranges"]
