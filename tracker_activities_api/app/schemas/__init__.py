"""
Pydantic schema definitions for API payloads.

Each domain defines its request schema (the validation rules applied
to incoming parameters) and its read models (the rows returned to
clients).  Schemas are separated from the SQL in ``services`` to
decouple API representation from persistence.
"""
