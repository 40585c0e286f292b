from __future__ import annotations

import json

from pydantic import BaseModel

from sysinfo_cli.collectors.base import Snapshot


def to_jsonable(snapshot: Snapshot) -> dict | list:
    if isinstance(snapshot, BaseModel):
        return snapshot.model_dump(mode="json")
    return [item.model_dump(mode="json") for item in snapshot]


def render_json(snapshot: Snapshot) -> str:
    """Pretty-printed JSON document for one snapshot or list of snapshots."""
    return json.dumps(to_jsonable(snapshot), indent=2, ensure_ascii=False)
