from frame_promptly.core.exceptions.domain_error import DomainError


class TemplateNotFoundError(DomainError):
    """Raised when a template id is not present in the template library."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Template {template_id} not found")
