from studio.domains.templates.schemas import Template
from studio.domains.templates.services import TemplateService

__all__ = ["Template", "TemplateService"]
