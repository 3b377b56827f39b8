import json
from typing import Dict, Optional


def encode_scores(scores: Optional[Dict[str, float]]) -> Optional[str]:
    """Serialize a type id -> score map for storage. None stays None."""
    if scores is None:
        return None
    return json.dumps({str(type_id): score for type_id, score in scores.items()})


def decode_scores(raw: Optional[str]) -> Optional[Dict[str, float]]:
    if not raw:
        return None
    return json.loads(raw)
