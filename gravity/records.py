import logging
import math

from .Entity import Entity
from .constants import ENTITY_FIELDS, FIELD_NAMES

logger = logging.getLogger(__name__)


class RecordError(ValueError):
    """An entity record that could not be turned into an Entity."""
    def __init__(self, row, field, reason):
        self.row = row
        self.field = field
        self.reason = reason
        super().__init__(f"Could not parse {field} in row {row}: {reason}")


def _is_blank(value):
    return value is None or (isinstance(value, str) and value.strip() == '')


def parse_record(row, rownum=0):
    """
    Parse one record of (mass, px, py, vx, vy, ax, ay) into an Entity.

    Returns None for a wholly blank record. Raises RecordError naming the
    first field that is missing, unparseable or non-finite, or when the mass
    is not positive.
    """
    row = list(row)
    if all(_is_blank(v) for v in row):
        return None
    if len(row) != ENTITY_FIELDS:
        raise RecordError(rownum, 'record', f"expected {ENTITY_FIELDS} fields, got {len(row)}")

    values = []
    for field, raw in zip(FIELD_NAMES, row):
        if _is_blank(raw):
            raise RecordError(rownum, field, "empty field")
        try:
            value = float(raw.strip() if isinstance(raw, str) else raw)
        except (TypeError, ValueError) as exc:
            raise RecordError(rownum, field, str(exc)) from exc
        if not math.isfinite(value):
            raise RecordError(rownum, field, f"{raw!r} is not finite")
        values.append(value)

    if values[0] <= 0.0:
        raise RecordError(rownum, FIELD_NAMES[0], f"{values[0]} is not positive")

    return Entity.from_record(*values)


def parse_records(rows, on_error=None):
    """
    Build entities from a table of records. Rows that fail to parse are
    logged, handed to `on_error` if given, and skipped; blank rows are
    skipped silently.
    """
    entities = []
    for rownum, row in enumerate(rows):
        try:
            entity = parse_record(row, rownum)
        except RecordError as err:
            logger.warning("%s - skipping", err)
            if on_error is not None:
                on_error(err)
            continue
        if entity is not None:
            entities.append(entity)
    logger.debug("Parsed %d entities", len(entities))
    return entities
