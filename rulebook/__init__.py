"""
rulebook — wyszukiwanie reguł i haseł w dokumencie zasad.

Publiczne API:
  load_document(path)                    → Document
  document_from_dict(data)               → Document
  resolve(document, identifier)          → surowy węzeł | None
  ancestor_names(document, identifier)   → list[str]
  classify(node, identifier)             → Section | Rule
  iconify(text)                          → str
  list_contents(content)                 → str
  lookup_rule / lookup_glossary / list_top_level_contents / version_info
                                         → DisplayResult

Typowe użycie:
    from rulebook import load_document, lookup_rule

    document = load_document("cr.json")
    result   = lookup_rule(document, "1.2.a")
    if result.is_error:
        print(result.description)
"""

from .icons    import ICONS, iconify
from .loader   import load_document, document_from_dict
from .render   import classify, list_contents, render_node, render_not_found
from .resolver import access_path, ancestor_names, ancestor_trail, resolve
from .service  import (
    glossary_entry,
    list_top_level_contents,
    lookup_glossary,
    lookup_rule,
    version_info,
)
from .types    import (
    DisplayResult,
    Document,
    DocumentLoadError,
    Field,
    GlossaryEntry,
    MalformedDocumentError,
    Node,
    Rule,
    RulebookError,
    Section,
    UnresolvedIdentifierError,
)

__all__ = [
    # icons
    "ICONS",
    "iconify",
    # loader
    "load_document",
    "document_from_dict",
    # render
    "classify",
    "list_contents",
    "render_node",
    "render_not_found",
    # resolver
    "access_path",
    "ancestor_names",
    "ancestor_trail",
    "resolve",
    # service
    "glossary_entry",
    "list_top_level_contents",
    "lookup_glossary",
    "lookup_rule",
    "version_info",
    # types
    "DisplayResult",
    "Document",
    "DocumentLoadError",
    "Field",
    "GlossaryEntry",
    "MalformedDocumentError",
    "Node",
    "Rule",
    "RulebookError",
    "Section",
    "UnresolvedIdentifierError",
]
