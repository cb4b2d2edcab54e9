from healthcare_records.mapping.binder import bind, declared_fields, resolve_getter
from healthcare_records.mapping.synthesizer import (
    assignment_list,
    delete_statement,
    insert_statement,
    select_all,
    set_list,
    update_statement,
)

__all__ = [
    "bind",
    "declared_fields",
    "resolve_getter",
    "assignment_list",
    "set_list",
    "select_all",
    "insert_statement",
    "delete_statement",
    "update_statement",
]
