import logging

from jsscribe.config import ScanConfig
from jsscribe.discovery import node_text
from jsscribe.locate import ClassBodyIndex, SearchCursor
from jsscribe.models import DocumentableEntity, EntityDescriptor
from jsscribe.patterns import build_pattern, entity_parameters, normalize_text

logger = logging.getLogger(__name__)

__all__ = ["metainfo", "normalize_text"]


def _entity_name(entity: DocumentableEntity) -> str:
    name_node = entity.node.child_by_field_name("name")
    return node_text(name_node) if name_node is not None else ""


def metainfo(
    entities: list[DocumentableEntity],
    source_code: str,
    config: ScanConfig | None = None,
) -> list[EntityDescriptor]:
    """Gather location and header information for discovered entities.

    Top-level entities are searched for in the whole text; methods only in the
    text of their class. Each search resumes past the previous match in the
    same text, so repeated headers map to successive occurrences. Entities
    that cannot be located are left out.

    Args:
        entities: Entities from discovery, in source order
        source_code: Text the entities were parsed from
        config: Scan configuration (defaults if None)

    Returns:
        Descriptors for every entity that was located
    """
    config = config or ScanConfig()
    text = normalize_text(source_code, config.tab_size)
    lines = text.split("\n")
    classes = ClassBodyIndex(text)
    top_level = SearchCursor(text)
    class_cursors: dict[str, SearchCursor] = {}
    catalog = []

    for entity in entities:
        name = _entity_name(entity)
        pattern = build_pattern(entity, config.tab_size)
        if pattern is None:
            logger.debug(f"Skipping {entity.kind} '{name}': header cannot be modelled")
            continue

        if entity.kind == "method":
            class_text = classes.get(entity.enclosing_class)
            if class_text is None:
                logger.debug(
                    f"Skipping method '{name}': class '{entity.enclosing_class}' not found"
                )
                continue
            cursor = class_cursors.get(entity.enclosing_class)
            if cursor is None:
                cursor = SearchCursor(class_text.text, class_text.start)
                class_cursors[entity.enclosing_class] = cursor
            location, match = cursor.resolve(pattern, lines)
        else:
            location, match = top_level.resolve(pattern, lines)
            if entity.kind == "class" and match is not None:
                if name in classes:
                    logger.debug(f"Class '{name}' declared again, methods reuse the first body")
                else:
                    # Isolate the body from the located header.
                    classes.get(name, opening=pattern, start=match.index)

        if match is None:
            logger.debug(f"Skipping {entity.kind} '{name}': no match for {pattern}")
            continue

        catalog.append(EntityDescriptor(
            kind=entity.kind,
            line=location.line,
            indent=location.indent,
            header=match.text,
            enclosing_class=entity.enclosing_class,
            params=entity_parameters(entity),
            declaration_keyword=entity.declaration_keyword,
            name=name,
        ))

    logger.debug(f"Located {len(catalog)} of {len(entities)} entities")
    return catalog
