"""
Template Service implementation for the document markup templates.

Templates are Quarto markdown with Jinja2 syntax. Quarto attribute blocks
open with ``{#``, which collides with Jinja's comment syntax, so the
environment uses ``[#`` / ``#]`` for comments instead.
"""

from pathlib import Path
from typing import Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from clickstories.application.ports import TemplateServicePort
from clickstories.application.services.markup import quote_attr, yaml_bool, yaml_quote
from clickstories.domain_core.exceptions import LayoutTemplateError
from clickstories.infra.config.logging_config import get_logger
from clickstories.infra.config.settings import get_settings


class TemplateService(TemplateServicePort):
    """
    Infrastructure implementation of the template port using Jinja2.
    """

    def __init__(self, template_directory: Optional[str] = None):
        """
        Initialize template service.

        Args:
            template_directory: Path to directory containing template files.
                Defaults to the configured (packaged) template directory.
        """
        self.template_directory = Path(
            template_directory or get_settings().template_dir
        )
        self._log = get_logger("infra.template_service")

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_directory)),
            autoescape=False,  # Markdown output; values are quoted by filters
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            comment_start_string="[#",
            comment_end_string="#]",
        )
        self.jinja_env.filters["yaml_quote"] = yaml_quote
        self.jinja_env.filters["attr_quote"] = quote_attr
        self.jinja_env.filters["yaml_bool"] = yaml_bool

    def render(self, template_filename: str, context: Mapping[str, object]) -> str:
        """
        Render a markup template.

        Raises:
            LayoutTemplateError: If the template file does not exist.
        """
        try:
            template = self.jinja_env.get_template(template_filename)
        except TemplateNotFound as e:
            self._log.error(
                "template.missing",
                template=template_filename,
                directory=str(self.template_directory),
            )
            raise LayoutTemplateError(
                template_filename, "template file not found"
            ) from e
        return template.render(**context)
