import uuid

def new_objective_id(prefix: str) -> str:
    """Random per-objective id, e.g. ``cog-3f2a...``. Never derived from the clock."""
    return f"{prefix}-{uuid.uuid4().hex}"
