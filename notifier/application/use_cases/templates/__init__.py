"""Use cases for managing message templates."""

from .create_template import create_template
from .delete_template import delete_template
from .get_template import get_template
from .list_templates import list_templates
from .update_template import update_template

__all__ = [
    "create_template",
    "delete_template",
    "get_template",
    "list_templates",
    "update_template",
]
