from .hwhkit_error import HwhKitError


class TemplateRenderError(HwhKitError):
    def __init__(self, template_name: str, reason: str):
        self.template_name: str = template_name
        super().__init__(f"Failed to render template {template_name!r}: {reason}")
