from .template_engine import DisabledTemplateEngine, TemplateEngine, create_template_engine

__all__ = (
    "TemplateEngine",
    "DisabledTemplateEngine",
    "create_template_engine",
)
