"""
Read-only description of the host base: tables and their fields.

The host owns the real data model; this is only what settings validation
needs to turn configured ids into objects.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Field:
    id: str
    name: str
    type: str


@dataclass(frozen=True)
class Table:
    id: str
    name: str
    fields: List[Field] = field(default_factory=list)

    def get_field_by_id_if_exists(self, field_id: Optional[str]) -> Optional[Field]:
        for f in self.fields:
            if f.id == field_id:
                return f
        return None


@dataclass(frozen=True)
class Base:
    tables: List[Table] = field(default_factory=list)

    def get_table_by_id_if_exists(self, table_id: Optional[str]) -> Optional[Table]:
        for t in self.tables:
            if t.id == table_id:
                return t
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Base":
        """
        Build a base from ``{"tables": [{"id", "name", "fields": [...]}]}``.

        Raises:
            ValueError: If the payload is not shaped like a base, or a table
                or field is missing its id
        """
        raw_tables = data.get("tables", [])
        if not isinstance(raw_tables, list):
            raise ValueError("'tables' must be a list")
        tables = []
        for i, t in enumerate(raw_tables):
            if not isinstance(t, dict):
                raise ValueError(f"Table #{i} must be an object")
            if not t.get("id"):
                raise ValueError(f"Table #{i} is missing an id")
            raw_fields = t.get("fields", [])
            if not isinstance(raw_fields, list):
                raise ValueError(f"'fields' of table '{t['id']}' must be a list")
            fields = []
            for j, f in enumerate(raw_fields):
                if not isinstance(f, dict):
                    raise ValueError(f"Field #{j} of table '{t['id']}' must be an object")
                if not f.get("id"):
                    raise ValueError(f"Field #{j} of table '{t['id']}' is missing an id")
                fields.append(Field(id=f["id"], name=f.get("name", f["id"]), type=f.get("type", "")))
            tables.append(Table(id=t["id"], name=t.get("name", t["id"]), fields=fields))
        return cls(tables=tables)
