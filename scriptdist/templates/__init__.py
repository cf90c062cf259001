from scriptdist.templates.source import (
    DirectoryTemplateSource,
    TemplateFile,
    TemplateSource,
    default_template_source,
)

__all__ = [
    "DirectoryTemplateSource",
    "TemplateFile",
    "TemplateSource",
    "default_template_source",
]
