"""
Model classifier.

Decides what each scanned section defines, from two weak signals:
  - a non-empty case list           → UnionDef
  - upper-case first title letter   → RecordDef
  - lower-case first title letter   → OperationDef

Sections with an empty title, or a title starting with anything that is not
a cased letter, are dropped. Rows missing a name or type cell are dropped from
records and operations; neither is an error.
"""

from typing import Optional

from .config import SyntheticUnion
from .schemas import Entity, OperationDef, RecordDef, Table, UnionDef
from .logger import get_module_logger

logger = get_module_logger("classifier")


def classify(table: Table) -> Optional[Entity]:
    """
    Classify one section.

    Args:
        table: A scanned section

    Returns:
        The entity it defines, or None when the title cannot be classified
    """
    title = table.title
    if not title:
        return None

    if table.case_list:
        return UnionDef(name=title, note=table.note, cases=list(table.case_list))

    first = title[0]
    if not (first.isupper() or first.islower()):
        logger.debug(f"Dropping section with unclassifiable title: {title!r}")
        return None

    fields = [row for row in table.fields if row.is_complete]
    if len(fields) != len(table.fields):
        logger.debug(f"{title}: dropped {len(table.fields) - len(fields)} incomplete rows")

    if first.isupper():
        return RecordDef(title=title, note=table.note, fields=fields)
    return OperationDef(title=title, note=table.note, fields=fields)


def classify_document(
    tables: list[Table],
    synthetic_unions: Optional[list[SyntheticUnion]] = None
) -> list[Entity]:
    """
    Classify every section, synthetic unions first.

    Args:
        tables: Scanner output, in document order
        synthetic_unions: Unions the document only describes in prose

    Returns:
        Entities in output order
    """
    entities: list[Entity] = [
        UnionDef(name=union.name, note=f"{union.name}: {' or '.join(union.cases)}",
                 cases=list(union.cases))
        for union in synthetic_unions or []
    ]

    for table in tables:
        entity = classify(table)
        if entity is not None:
            entities.append(entity)

    counts = {}
    for entity in entities:
        counts[entity.kind] = counts.get(entity.kind, 0) + 1
    logger.info(f"Classified {len(entities)} entities: {counts}")
    return entities
